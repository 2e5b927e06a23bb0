"""
History Extractor Module - 브랜치 범위 커밋 이력 추출

소스 브랜치에는 있지만 타겟 브랜치에는 없는 커밋을 git log로 조회하고,
각 출력 라인을 CommitRecord로 파싱하여 작성자 이메일별로 묶습니다.
"""
from pathlib import Path
from typing import List, Optional, Union

from branch_committers.core.command_runner import CommandRunner
from branch_committers.core.exceptions import MalformedOutputError, QueryExecutionError
from branch_committers.core.vcs_models import CommitRecord, CommitterAggregate
from branch_committers.utils.logger import get_logger, log_execution_time

logger = get_logger(__name__)


class HistoryExtractor:
    """git log 기반 커밋 이력 추출 클래스"""

    GIT_CMD_LOG = 'log'
    # 사용자 git 설정(log.showSignature)이 서명 검증 라인을 끼워 넣지 않도록 함
    GIT_LOG_OPTIONS = ('--no-show-signature',)

    # 이름/이메일에 나타나지 않는 ASCII Unit Separator(0x1f)를 구분자로 사용
    LOG_FIELD_SEPARATOR = '\x1f'
    LOG_FORMAT = '%x1f'.join(['%H', '%an', '%aE', '%at'])
    LOG_FIELD_COUNT = 4

    def __init__(self, runner: Optional[CommandRunner] = None, timeout: Optional[float] = None):
        """
        HistoryExtractor 초기화

        Args:
            runner: 명령 실행기 (None이면 subprocess 기반 CommandRunner)
            timeout: git log 타임아웃 (초, None이면 무제한)
        """
        self.runner = runner or CommandRunner()
        self.timeout = timeout

    def build_command(self, command_path: str, source_branch: str, target_branch: str) -> List[str]:
        """git log 명령 인자 목록 생성"""
        return [
            str(command_path),
            self.GIT_CMD_LOG,
            *self.GIT_LOG_OPTIONS,
            f'--format={self.LOG_FORMAT}',
            # 범위 인자가 '-'로 시작해도 옵션으로 해석되지 않음 (git 2.24+)
            '--end-of-options',
            f'{target_branch}..{source_branch}',
        ]

    @log_execution_time
    def extract(
        self,
        command_path: str,
        repository_path: Union[str, Path],
        source_branch: str,
        target_branch: str
    ) -> CommitterAggregate:
        """
        브랜치 범위의 커밋을 작성자 이메일별로 추출

        Args:
            command_path: git 실행 파일 경로
            repository_path: 저장소 경로 (명령의 작업 디렉토리)
            source_branch: 소스 브랜치
            target_branch: 타겟 브랜치

        Returns:
            이메일 -> 커밋 목록 (처음 등장한 순서 유지)

        Raises:
            QueryExecutionError: git log가 0이 아닌 코드로 종료되거나 타임아웃된 경우
            MalformedOutputError: 출력 라인이 네 개의 필드로 나뉘지 않는 경우
        """
        command = self.build_command(command_path, source_branch, target_branch)
        result = self.runner.run(command, cwd=repository_path, timeout=self.timeout)

        if result.returncode != 0:
            logger.error(f"History query failed with code {result.returncode}: {result.stderr.strip()}")
            raise QueryExecutionError(command, result.returncode, result.stderr)

        committers = self.parse_output(result.stdout_lines)
        logger.info(
            f"Found {sum(len(c) for c in committers.values())} commits "
            f"by {len(committers)} committers in {target_branch}..{source_branch}"
        )
        return committers

    def parse_output(self, lines: List[str]) -> CommitterAggregate:
        """git log 출력 라인 목록을 이메일별 커밋 목록으로 변환"""
        committers: CommitterAggregate = {}

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            record = self.parse_line(line, line_number)
            committers.setdefault(record.author_email, []).append(record)

        return committers

    def parse_line(self, line: str, line_number: int = 1) -> CommitRecord:
        """
        git log 출력 한 줄을 CommitRecord로 파싱

        Args:
            line: 출력 라인
            line_number: 오류 메시지에 사용할 라인 번호

        Returns:
            파싱된 커밋 레코드
        """
        fields = line.split(self.LOG_FIELD_SEPARATOR)
        if len(fields) != self.LOG_FIELD_COUNT:
            raise MalformedOutputError(
                line_number, line,
                f"expected {self.LOG_FIELD_COUNT} fields, got {len(fields)}"
            )

        commit_hash, author_name, author_email, timestamp = fields
        try:
            commit_timestamp = int(timestamp)
        except ValueError:
            raise MalformedOutputError(line_number, line, f"invalid timestamp {timestamp!r}")

        return CommitRecord(
            commit_hash=commit_hash,
            author_name=author_name,
            author_email=author_email,
            commit_timestamp=commit_timestamp
        )
