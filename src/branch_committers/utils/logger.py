"""
Logging Utility Module

리포트 테이블은 stdout으로만 출력되므로, 모든 로그는 stderr(또는 로그 파일)로 보냅니다.
"""
import functools
import logging
import time
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


# 로그 출력용 콘솔 (리포트 출력과 섞이지 않도록 stderr 사용)
console = Console(stderr=True)

LOGGER_NAME = "branch_committers"

FILE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


def _resolve_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{log_level}'")
    return level


def setup_logger(
    log_level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_console: Optional[Console] = None
) -> logging.Logger:
    """
    패키지 로거 설정

    반복 호출해도 핸들러가 중복되지 않습니다 (CLI 테스트처럼 여러 번 실행되는 경우).

    Args:
        log_level: 콘솔 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: 로그 파일 경로 (선택사항, 레벨과 무관하게 DEBUG까지 기록)
        log_console: 로그를 출력할 rich 콘솔 (None이면 stderr 콘솔)

    Returns:
        설정된 로거 객체
    """
    level = _resolve_level(log_level)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=log_console or console,
        show_time=True,
        show_path=True,
        rich_tracebacks=True,
        markup=False
    )
    rich_handler.setLevel(level)
    logger.addHandler(rich_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    # 파일 핸들러가 DEBUG 레코드를 받을 수 있도록 로거 자체는 가장 낮은 레벨 사용
    logger.setLevel(logging.DEBUG if log_file else level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    패키지 하위 로거 가져오기

    모듈의 __name__을 그대로 넘겨도 'branch_committers.' 접두사가 중복되지 않습니다.
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def log_execution_time(func):
    """git 조회처럼 오래 걸릴 수 있는 호출의 실행 시간을 DEBUG로 기록"""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start_time = time.monotonic()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.debug(f"{func.__name__} failed after {time.monotonic() - start_time:.2f} seconds: {e}")
            raise
        logger.debug(f"{func.__name__} completed in {time.monotonic() - start_time:.2f} seconds")
        return result

    return wrapper


class LogContext:
    """작업 시작/완료/실패를 기록하는 컨텍스트 관리자"""

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None):
        self.operation = operation
        self.logger = logger or get_logger()
        self.start_time = None

    def __enter__(self):
        self.start_time = time.monotonic()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed_time = time.monotonic() - self.start_time

        if exc_type is None:
            self.logger.info(f"Completed {self.operation} in {elapsed_time:.2f} seconds")
        else:
            self.logger.error(f"Failed {self.operation} after {elapsed_time:.2f} seconds: {exc_val}")

        return False
