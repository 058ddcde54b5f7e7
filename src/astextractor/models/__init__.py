"""
데이터 모델 모듈
"""

from .parse_request import (
    FileRequest,
    ParseRequest,
    ProjectRequest,
    Representation,
    UsageError,
)
from .source_file import SourceFile

__all__ = [
    "SourceFile",
    "Representation",
    "ProjectRequest",
    "FileRequest",
    "ParseRequest",
    "UsageError",
]
