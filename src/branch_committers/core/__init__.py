"""
Core modules for Branch Committers
"""

from .exceptions import (
    CommandNotFoundError,
    CommittersError,
    MalformedOutputError,
    QueryExecutionError,
    ReportConfigurationError,
    RepositoryPathError,
    TableLayoutError,
)
from .history_extractor import HistoryExtractor
from .report import CommittersReport, ReportConfiguration
from .table_renderer import CommitterTableRenderer
from .vcs_models import CommitRecord, CommitterAggregate

__all__ = [
    "CommitRecord",
    "CommitterAggregate",
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
]
