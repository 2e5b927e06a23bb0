"""
Configuration Management Module

환경 변수 및 설정 파일을 관리하는 모듈
"""
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

ENV_PREFIX = "BRANCH_COMMITTERS_"
DEFAULT_COLUMN_WIDTHS = (40, 30)
TABLE_STYLES = ('unicode', 'ascii')


def parse_column_widths(value: str) -> Tuple[int, ...]:
    """'40,30' 형태의 문자열을 컬럼 폭 튜플로 변환"""
    try:
        return tuple(int(part) for part in value.split(',') if part.strip())
    except ValueError:
        raise ValueError(f"Invalid column widths: {value!r}")


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass
class GitConfig:
    """git 실행 설정"""
    command: Optional[str]
    query_timeout: Optional[float]

    @classmethod
    def from_env(cls) -> 'GitConfig':
        """환경 변수에서 설정 로드"""
        return cls(
            command=os.getenv(f'{ENV_PREFIX}GIT_COMMAND') or None,
            query_timeout=_optional_float(os.getenv(f'{ENV_PREFIX}QUERY_TIMEOUT'))
        )


@dataclass
class TableConfig:
    """테이블 렌더링 설정"""
    column_widths: Tuple[int, ...]
    style: str

    @classmethod
    def from_env(cls) -> 'TableConfig':
        """환경 변수에서 설정 로드"""
        widths = os.getenv(f'{ENV_PREFIX}COLUMN_WIDTHS')
        return cls(
            column_widths=parse_column_widths(widths) if widths else DEFAULT_COLUMN_WIDTHS,
            style=os.getenv(f'{ENV_PREFIX}TABLE_STYLE', 'unicode')
        )


@dataclass
class AppConfig:
    """애플리케이션 전체 설정"""
    repository_path: Optional[Path]
    log_level: str
    log_file: Optional[str]

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """환경 변수에서 설정 로드"""
        repository = os.getenv(f'{ENV_PREFIX}REPOSITORY')
        return cls(
            repository_path=Path(repository) if repository else None,
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
            log_file=os.getenv('LOG_FILE') or None
        )


class Config:
    """통합 설정 관리 클래스"""

    def __init__(self, config_file: Optional[str] = None):
        """
        설정 초기화

        Args:
            config_file: JSON 설정 파일 경로 (선택사항)
        """
        self.git = GitConfig.from_env()
        self.table = TableConfig.from_env()
        self.app = AppConfig.from_env()

        # 설정 파일이 있으면 오버라이드
        if config_file:
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str):
        """설정 파일에서 설정 로드"""
        config_path = Path(config_file)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        self._update_from_dict(data)

    def _update_from_dict(self, data: Dict[str, Any]):
        """딕셔너리에서 설정 업데이트"""
        for section_name in ('git', 'table', 'app'):
            section = getattr(self, section_name)
            for key, value in data.get(section_name, {}).items():
                if not hasattr(section, key):
                    continue
                if key == 'column_widths':
                    value = parse_column_widths(value) if isinstance(value, str) else tuple(value)
                elif key == 'repository_path' and value is not None:
                    value = Path(value)
                setattr(section, key, value)

    def validate(self) -> List[str]:
        """설정 유효성 검증"""
        errors = []

        if not self.table.column_widths:
            errors.append("At least one column width must be configured")
        for width in self.table.column_widths:
            if not isinstance(width, int) or width <= 0:
                errors.append(f"Column width must be a positive integer, got {width!r}")
        if self.table.style not in TABLE_STYLES:
            errors.append(f"Unknown table style '{self.table.style}'")

        if self.git.query_timeout is not None and self.git.query_timeout <= 0:
            errors.append(f"Query timeout must be positive, got {self.git.query_timeout}")

        if not isinstance(logging.getLevelName(self.app.log_level.upper()), int):
            errors.append(f"Unknown log level '{self.app.log_level}'")

        return errors
