"""
Committers Report Module - 브랜치 커미터 리포트

소스 브랜치에만 있는 커밋의 작성자와 커밋 수를 텍스트 테이블로 생성합니다.
"""
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Sequence, Union

from branch_committers.core.exceptions import (
    CommandNotFoundError,
    ReportConfigurationError,
    RepositoryPathError,
)
from branch_committers.core.history_extractor import HistoryExtractor
from branch_committers.core.table_renderer import CommitterTableRenderer
from branch_committers.core.vcs_models import CommitterAggregate
from branch_committers.utils.git_locator import find_git_command, is_invocable
from branch_committers.utils.logger import LogContext, get_logger

logger = get_logger(__name__)


def validate_command_path(command_path: str) -> str:
    """
    git 명령 경로 검증

    Raises:
        CommandNotFoundError: 파일이 없거나 실행할 수 없는 경우
    """
    if not os.path.lexists(command_path):
        raise CommandNotFoundError(command_path, "not found")
    if not is_invocable(command_path):
        raise CommandNotFoundError(command_path, "is not an executable file")
    return command_path


def validate_repository_path(path: Path) -> Path:
    """
    저장소 경로 검증 (작업 트리 체크아웃 또는 bare 저장소)

    Raises:
        RepositoryPathError: 디렉토리가 없거나 git 저장소가 아닌 경우
    """
    if not path.is_dir():
        raise RepositoryPathError(str(path), "does not exist")

    # 워크트리/서브모듈에서는 .git이 파일일 수 있음
    if not (path / '.git').exists() and not (path / 'objects').is_dir():
        logger.debug(f"Contents of {path}: {sorted(p.name for p in path.iterdir())}")
        raise RepositoryPathError(str(path), "is neither a bare repository nor a git checkout")
    return path


@dataclass(frozen=True)
class ReportConfiguration:
    """리포트 설정 (생성 시 검증되는 불변 값)"""
    command_path: str
    repository_path: Path
    source_branch: str
    target_branch: str

    def __post_init__(self):
        object.__setattr__(self, 'repository_path', Path(self.repository_path))
        validate_command_path(self.command_path)
        validate_repository_path(self.repository_path)
        for field_name in ('source_branch', 'target_branch'):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ReportConfigurationError(f"{field_name} must be a non-empty branch name")
            # git이 브랜치 이름을 옵션으로 해석하지 않도록 거부
            if value.startswith('-'):
                raise ReportConfigurationError(f"{field_name} must not start with '-', got {value!r}")

    @classmethod
    def create(
        cls,
        source_branch: str,
        target_branch: str,
        command_path: Optional[str] = None,
        repository_path: Optional[Union[str, Path]] = None
    ) -> 'ReportConfiguration':
        """
        기본값을 채워서 설정 생성

        Args:
            source_branch: 소스 브랜치
            target_branch: 타겟 브랜치
            command_path: git 실행 파일 경로 (None이면 자동 탐색)
            repository_path: 저장소 경로 (None이면 현재 작업 디렉토리)
        """
        return cls(
            command_path=command_path or find_git_command(),
            repository_path=Path(repository_path) if repository_path else Path(os.getcwd()),
            source_branch=source_branch,
            target_branch=target_branch
        )

    def with_git_command(self, command_path: str) -> 'ReportConfiguration':
        return replace(self, command_path=command_path)

    def with_repository_path(self, repository_path: Union[str, Path]) -> 'ReportConfiguration':
        return replace(self, repository_path=Path(repository_path))

    def with_source_branch(self, source_branch: str) -> 'ReportConfiguration':
        return replace(self, source_branch=source_branch)

    def with_target_branch(self, target_branch: str) -> 'ReportConfiguration':
        return replace(self, target_branch=target_branch)

    @property
    def branch_range(self) -> str:
        return f"{self.target_branch}..{self.source_branch}"


class CommittersReport:
    """브랜치 커미터 리포트"""

    def __init__(
        self,
        configuration: ReportConfiguration,
        extractor: Optional[HistoryExtractor] = None,
        column_widths: Sequence[int] = CommitterTableRenderer.DEFAULT_COLUMN_WIDTHS,
        style: str = 'unicode'
    ):
        """
        CommittersReport 초기화

        Args:
            configuration: 검증된 리포트 설정
            extractor: 커밋 이력 추출기 (None이면 기본 HistoryExtractor)
            column_widths: 테이블 컬럼 폭
            style: 테이블 테두리 스타일
        """
        self.configuration = configuration
        self.extractor = extractor or HistoryExtractor()
        self.renderer = CommitterTableRenderer(column_widths, style=style)
        self._committers: Optional[CommitterAggregate] = None
        self._output: Optional[str] = None

    @property
    def committers(self) -> CommitterAggregate:
        """이메일별 커밋 집계 (최초 접근 시 한 번만 조회)"""
        if self._committers is None:
            config = self.configuration
            self._committers = self.extractor.extract(
                config.command_path,
                config.repository_path,
                config.source_branch,
                config.target_branch
            )
        return self._committers

    def run(self) -> str:
        """리포트 테이블 문자열 반환 (결과는 캐시됨)"""
        if self._output is None:
            with LogContext(f"committers report for {self.configuration.branch_range}", logger):
                self._output = self.renderer.render(self.committers)
        return self._output

    def __str__(self) -> str:
        return self.run()
