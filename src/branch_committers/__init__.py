"""
Branch Committers

소스 브랜치에만 있는 커밋의 작성자별 커밋 수 리포트 도구
"""

__version__ = "0.1.0"

from pathlib import Path
from typing import Optional, Union

from .core.exceptions import (
    CommandNotFoundError,
    CommittersError,
    MalformedOutputError,
    QueryExecutionError,
    ReportConfigurationError,
    RepositoryPathError,
    TableLayoutError,
)
from .core.history_extractor import HistoryExtractor
from .core.report import CommittersReport, ReportConfiguration
from .core.table_renderer import CommitterTableRenderer
from .core.vcs_models import CommitRecord

from .utils.config import Config
from .utils.logger import get_logger, setup_logger

__all__ = [
    "CommitRecord",
    "HistoryExtractor",
    "CommitterTableRenderer",
    "CommittersReport",
    "ReportConfiguration",
    "CommittersError",
    "ReportConfigurationError",
    "CommandNotFoundError",
    "RepositoryPathError",
    "QueryExecutionError",
    "MalformedOutputError",
    "TableLayoutError",
    "Config",
    "get_logger",
    "setup_logger",
    "create_report",
]


def create_report(
    source_branch: str,
    target_branch: str,
    repository_path: Optional[Union[str, Path]] = None,
    command_path: Optional[str] = None
) -> CommittersReport:
    """
    커미터 리포트를 생성합니다.

    Args:
        source_branch: 소스 브랜치
        target_branch: 타겟 브랜치
        repository_path: 저장소 경로 (기본값: 현재 디렉토리)
        command_path: git 실행 파일 경로 (기본값: 자동 탐색)

    Returns:
        CommittersReport 인스턴스
    """
    configuration = ReportConfiguration.create(
        source_branch,
        target_branch,
        command_path=command_path,
        repository_path=repository_path
    )
    return CommittersReport(configuration)
