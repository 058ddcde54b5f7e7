"""
Java AST Parser

tree-sitter를 사용하여 Java 소스 코드를 추상 구문 트리(AST)로 파싱하고,
AST를 XML 문서로 변환하는 모듈입니다.
"""

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple, Union

import tree_sitter_java as tsjava
from lxml import etree
from tree_sitter import Language, Node, Parser, Tree

from ..config.config_manager import ExtractorProperties

logger = logging.getLogger(__name__)

# Java 언어 설정
JAVA_LANGUAGE = Language(tsjava.language())

# 소스 파일을 읽을 때 순서대로 시도할 인코딩
SOURCE_ENCODINGS = ["utf-8", "euc-kr", "cp949", "latin-1"]

# XML 1.0 문서에 들어갈 수 없는 문자
XML_ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


class JavaParseError(Exception):
    """Java 소스 코드에 구문 오류가 있을 때 발생하는 예외"""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column


@lru_cache(maxsize=1)
def known_node_kinds() -> FrozenSet[str]:
    """
    Java 문법이 정의하는 named 노드 종류 이름 집합

    Returns:
        FrozenSet[str]: 노드 종류 이름 집합
    """
    kinds = set()
    for kind_id in range(JAVA_LANGUAGE.node_kind_count):
        kind = JAVA_LANGUAGE.node_kind_for_id(kind_id)
        if kind and JAVA_LANGUAGE.node_kind_is_named(kind_id):
            kinds.add(kind)
    return frozenset(kinds)


def read_source_file(file_path: Union[str, Path]) -> str:
    """
    Java 파일 내용을 읽음 (여러 인코딩 시도)

    Args:
        file_path: Java 파일 경로

    Returns:
        str: 파일 내용

    Raises:
        FileNotFoundError: 파일이 없는 경우
        UnicodeDecodeError: 지원되는 인코딩으로 읽을 수 없는 경우
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"파일을 찾을 수 없습니다: {file_path}")

    raw = file_path.read_bytes()
    last_error: Optional[UnicodeDecodeError] = None
    for encoding in SOURCE_ENCODINGS:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError as e:
            last_error = e
            continue
    raise last_error


class JavaASTParser:
    """
    Java AST 파서 클래스

    tree-sitter로 Java 소스 코드를 파싱하고, 노드 필터 설정에 따라
    named 노드만 XML 요소로 변환합니다. 요소 이름은 노드 종류이며,
    출력할 자식이 없는 노드는 소스 텍스트를 요소 텍스트로 가집니다.
    """

    def __init__(self, properties: Optional[ExtractorProperties] = None):
        """
        JavaASTParser 초기화

        Args:
            properties: 노드 필터 설정 (None이면 모든 노드 출력)
        """
        self.parser = Parser(JAVA_LANGUAGE)
        self.properties = properties if properties is not None else ExtractorProperties()

        unknown = [
            kind
            for kind in self.properties.configured_kinds()
            if kind not in known_node_kinds()
        ]
        for kind in unknown:
            logger.warning(f"알 수 없는 노드 종류가 속성 파일에 지정되었습니다: {kind}")

    def parse_tree(self, source_code: str) -> Tree:
        """
        소스 코드를 tree-sitter 트리로 파싱

        Args:
            source_code: Java 소스 코드

        Returns:
            Tree: 파싱된 트리

        Raises:
            JavaParseError: 구문 오류가 있는 경우
        """
        tree = self.parser.parse(bytes(source_code, "utf8"))
        if tree.root_node.has_error:
            error_node = self._find_error_node(tree.root_node)
            line, column = error_node.start_point[0] + 1, error_node.start_point[1] + 1
            if error_node.is_missing:
                message = f"구문 오류: {line}행 {column}열에 '{error_node.type}'이(가) 누락되었습니다"
            else:
                message = f"구문 오류: {line}행 {column}열을 해석할 수 없습니다"
            raise JavaParseError(message, line, column)
        return tree

    def parse_to_element(self, source_code: str) -> etree._Element:
        """
        소스 코드를 파싱하여 AST XML 요소로 변환

        Args:
            source_code: Java 소스 코드

        Returns:
            etree._Element: AST 루트 요소 (program)
        """
        tree = self.parse_tree(source_code)
        return self._build_element(tree.root_node)

    def parse(self, source_code: str) -> str:
        """
        소스 코드를 파싱하여 AST를 XML 문자열로 반환

        Args:
            source_code: Java 소스 코드

        Returns:
            str: AST XML 문자열 (들여쓰기 없음)
        """
        return etree.tostring(self.parse_to_element(source_code), encoding="unicode")

    def parse_file(self, file_path: Union[str, Path]) -> etree._Element:
        """
        Java 파일을 파싱하여 AST XML 요소로 변환

        Args:
            file_path: Java 파일 경로

        Returns:
            etree._Element: AST 루트 요소

        Raises:
            FileNotFoundError: 파일이 없는 경우
            JavaParseError: 구문 오류가 있는 경우
        """
        source_code = read_source_file(file_path)
        try:
            return self.parse_to_element(source_code)
        except JavaParseError as e:
            raise JavaParseError(f"{file_path}: {e}", e.line, e.column) from e

    def _build_element(self, root_node: Node) -> etree._Element:
        """tree-sitter 노드를 필터 설정에 따라 XML 요소 트리로 변환"""
        # 깊게 중첩된 식에서도 재귀 한도에 걸리지 않도록 스택으로 순회
        root_element = etree.Element(root_node.type)
        stack: List[Tuple[Node, etree._Element]] = [(root_node, root_element)]

        while stack:
            node, element = stack.pop()
            if self.properties.is_leaf(node.type):
                element.text = self._node_text(node)
                continue

            children = [
                child
                for child in node.named_children
                if self.properties.includes(child.type)
            ]
            if not children:
                element.text = self._node_text(node)
                continue

            pending = []
            for child in children:
                pending.append((child, etree.SubElement(element, child.type)))
            stack.extend(reversed(pending))

        return root_element

    @staticmethod
    def _node_text(node: Node) -> str:
        """노드의 소스 텍스트 (XML에 쓸 수 없는 문자는 \\uXXXX로 치환)"""
        text = node.text.decode("utf8")
        return XML_ILLEGAL_CHARS.sub(lambda match: f"\\u{ord(match.group()):04x}", text)

    @staticmethod
    def _find_error_node(root_node: Node) -> Node:
        """첫 번째 ERROR 또는 누락 노드 탐색"""
        cursor_stack = [root_node]
        while cursor_stack:
            node = cursor_stack.pop()
            if node.type == "ERROR" or node.is_missing:
                return node
            if node.has_error:
                cursor_stack.extend(reversed(node.children))
        return root_node
