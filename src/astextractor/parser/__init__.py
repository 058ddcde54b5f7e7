"""
Parser 모듈

tree-sitter 기반 Java AST 파서를 제공합니다.
"""

from .java_ast_parser import JavaASTParser, JavaParseError, known_node_kinds, read_source_file

__all__ = ["JavaASTParser", "JavaParseError", "known_node_kinds", "read_source_file"]
