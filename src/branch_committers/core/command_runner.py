"""
Command Runner Module - 외부 명령 실행

git 같은 외부 명령을 지정된 작업 디렉토리에서 실행하고
표준 출력 라인과 종료 코드를 반환합니다.
"""
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from branch_committers.core.exceptions import (
    CommandNotFoundError,
    QueryExecutionError,
    RepositoryPathError,
)
from branch_committers.utils.logger import get_logger

logger = get_logger(__name__)


def _get_utf8_env():
    """UTF-8 인코딩을 위한 환경변수 설정"""
    env = os.environ.copy()
    env['PYTHONIOENCODING'] = 'utf-8'
    env['LC_ALL'] = 'C.UTF-8'
    env['LANG'] = 'en_US.UTF-8'
    return env


@dataclass
class CommandResult:
    """명령 실행 결과"""
    returncode: int
    stdout_lines: List[str] = field(default_factory=list)
    stderr: str = ""


class CommandRunner:
    """subprocess 기반 명령 실행기"""

    def run(
        self,
        args: List[str],
        cwd: Union[str, Path],
        timeout: Optional[float] = None
    ) -> CommandResult:
        """
        명령 실행

        작업 디렉토리는 subprocess에 직접 전달되므로
        호출한 프로세스의 현재 디렉토리는 바뀌지 않습니다.

        Args:
            args: 실행할 명령과 인자 목록
            cwd: 작업 디렉토리
            timeout: 타임아웃 (초, None이면 무제한)

        Returns:
            명령 실행 결과
        """
        logger.debug(f"Running {' '.join(args)} in {cwd}")

        if not Path(cwd).is_dir():
            raise RepositoryPathError(str(cwd), "does not exist")

        try:
            result = subprocess.run(
                args,
                cwd=str(cwd),
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',  # 디코딩 오류시 대체 문자 사용
                env=_get_utf8_env(),
                timeout=timeout
            )
        except subprocess.TimeoutExpired as e:
            logger.error(f"Command timed out after {timeout} seconds: {' '.join(args)}")
            raise QueryExecutionError(args, None) from e
        except (FileNotFoundError, PermissionError) as e:
            logger.error(f"Failed to invoke command {args[0]}: {e}")
            raise CommandNotFoundError(args[0], "could not be invoked") from e

        return CommandResult(
            returncode=result.returncode,
            stdout_lines=result.stdout.splitlines(),
            stderr=result.stderr
        )
