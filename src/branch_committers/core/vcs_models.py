from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class CommitRecord:
    commit_hash: str
    author_name: str
    author_email: str  # 집계 키
    commit_timestamp: int


# author_email -> 커밋 목록 (git log 출력 순서 유지)
CommitterAggregate = Dict[str, List[CommitRecord]]
