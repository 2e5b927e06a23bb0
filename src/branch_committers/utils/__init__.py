"""
Utility modules for Branch Committers
"""

from .config import Config
from .git_locator import find_git_command
from .logger import get_logger, setup_logger, LogContext

__all__ = ["Config", "find_git_command", "get_logger", "setup_logger", "LogContext"]
