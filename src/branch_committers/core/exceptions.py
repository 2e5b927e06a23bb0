"""
Exceptions Module - 커미터 리포트 예외 정의

리포트 생성 과정에서 발생하는 모든 오류는 CommittersError를 상속합니다.
"""
from typing import List, Optional


class CommittersError(Exception):
    """커미터 리포트 기본 예외"""


class ReportConfigurationError(CommittersError):
    """리포트 설정 오류"""


class CommandNotFoundError(ReportConfigurationError):
    """git 실행 파일을 찾을 수 없거나 실행할 수 없음"""

    def __init__(self, command: str, reason: str = "not found"):
        self.command = command
        super().__init__(f"Command '{command}' {reason}")


class RepositoryPathError(ReportConfigurationError):
    """저장소 경로가 없거나 git 저장소가 아님"""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Repository path {path} {reason}")


class QueryExecutionError(CommittersError):
    """git log 쿼리 실행 실패 (0이 아닌 종료 코드 또는 타임아웃)"""

    def __init__(self, command: List[str], exit_code: Optional[int], stderr: str = ""):
        self.command = list(command)
        self.exit_code = exit_code
        self.stderr = stderr
        command_line = " ".join(self.command)
        if exit_code is None:
            message = f"Command '{command_line}' timed out"
        else:
            message = f"Command '{command_line}' returned code {exit_code}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class MalformedOutputError(CommittersError):
    """git log 출력 라인을 파싱할 수 없음"""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Malformed history output at line {line_number}: {reason} ({line!r})")


class TableLayoutError(CommittersError):
    """테이블 컬럼 구성 오류"""
