"""
ASTExtractor

Java 소스 코드의 추상 구문 트리(AST)를 추출하여 XML 또는 JSON으로 직렬화합니다.
"""

from .config.config_manager import ConfigurationError, ExtractorProperties, load_properties
from .extractor import ASTExtractor
from .models.parse_request import FileRequest, ProjectRequest, Representation, UsageError
from .parser.java_ast_parser import JavaParseError

__version__ = "1.0.0"

__all__ = [
    "ASTExtractor",
    "ConfigurationError",
    "ExtractorProperties",
    "FileRequest",
    "JavaParseError",
    "ProjectRequest",
    "Representation",
    "UsageError",
    "load_properties",
]
