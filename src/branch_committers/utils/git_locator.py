"""
Git Locator Module - git 실행 파일 탐색

잘 알려진 설치 경로를 먼저 확인하고, 없으면 PATH에서 git을 찾습니다.
"""
import os
import shutil
from typing import Optional, Sequence

from branch_committers.core.exceptions import CommandNotFoundError
from branch_committers.utils.logger import get_logger

logger = get_logger(__name__)

GIT_SEARCH_PATHS = (
    '/usr/bin/git',
    '/usr/local/bin/git',
    '/usr/pkg/bin/git',
)


def is_invocable(path: str) -> bool:
    """실행 가능한 파일(또는 심볼릭 링크)인지 확인"""
    return (os.path.isfile(path) or os.path.islink(path)) and os.access(path, os.X_OK)


def find_git_command(
    search_paths: Sequence[str] = GIT_SEARCH_PATHS,
    path_env: Optional[str] = None
) -> str:
    """
    git 실행 파일 경로 탐색

    Args:
        search_paths: 순서대로 확인할 경로 목록
        path_env: PATH 대신 사용할 검색 경로 (None이면 환경변수 PATH)

    Returns:
        git 실행 파일 경로

    Raises:
        CommandNotFoundError: git을 찾지 못한 경우
    """
    for path in search_paths:
        if is_invocable(path):
            logger.debug(f"Using git command at {path}")
            return path

    found = shutil.which('git', path=path_env)
    if found and is_invocable(found):
        logger.debug(f"Using git command from PATH: {found}")
        return found

    raise CommandNotFoundError('git', "not found in search paths or PATH")
