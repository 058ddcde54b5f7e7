"""
AST Extractor 모듈

Java 파일, 소스 문자열, 프로젝트 폴더에서 AST를 추출하여 XML 또는 JSON으로 반환합니다.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from lxml import etree

from .collector.source_file_collector import SourceFileCollector
from .config.config_manager import ExtractorProperties
from .converter.format_converter import convert
from .models.parse_request import FileRequest, ParseRequest, ProjectRequest, Representation
from .parser.java_ast_parser import JavaASTParser

logger = logging.getLogger(__name__)


class ASTExtractor:
    """
    AST 추출기 클래스

    노드 필터 설정을 한 번 받아 모든 파싱 호출에 사용합니다.
    """

    def __init__(self, properties: Optional[ExtractorProperties] = None):
        """
        ASTExtractor 초기화

        Args:
            properties: 노드 필터 설정 (None이면 모든 노드 출력)
        """
        self.properties = properties if properties is not None else ExtractorProperties()
        self.parser = JavaASTParser(self.properties)

    def parse_string(
        self, source_code: str, representation: Representation = Representation.XML
    ) -> str:
        """
        Java 소스 문자열을 파싱하여 AST를 반환

        Args:
            source_code: Java 소스 코드
            representation: 출력 표현 형식

        Returns:
            str: XML 또는 JSON 형식의 AST
        """
        return convert(self.parser.parse(source_code), representation)

    def parse_file(
        self,
        file_path: Union[str, Path],
        representation: Representation = Representation.XML,
    ) -> str:
        """
        Java 파일을 파싱하여 AST를 반환

        Args:
            file_path: Java 파일 경로
            representation: 출력 표현 형식

        Returns:
            str: XML 또는 JSON 형식의 AST
        """
        logger.info(f"파일 파싱: {file_path}")
        root = self.parser.parse_file(file_path)
        return convert(etree.tostring(root, encoding="unicode"), representation)

    def parse_folder(
        self,
        folder_path: Union[str, Path],
        representation: Representation = Representation.XML,
    ) -> str:
        """
        폴더의 모든 Java 파일을 파싱하여 하나로 합친 AST를 반환

        각 파일의 AST는 <file><path>상대 경로</path><ast>...</ast></file>로 감싸
        <folder> 루트 아래에 순서대로 추가되며, 표현 형식 변환은 전체 문서에 한 번 적용됩니다.

        Args:
            folder_path: 폴더 경로
            representation: 출력 표현 형식

        Returns:
            str: XML 또는 JSON 형식의 통합 AST
        """
        collector = SourceFileCollector(Path(folder_path).absolute())
        logger.info(f"폴더 파싱: {collector.project_path}")

        folder = etree.Element("folder")
        count = 0
        for source_file in collector.collect():
            logger.debug(f"파일 파싱: {source_file.relative_path}")
            ast_root = self.parser.parse_file(source_file.path)

            file_element = etree.SubElement(folder, "file")
            etree.SubElement(file_element, "path").text = source_file.relative_path
            etree.SubElement(file_element, "ast").append(ast_root)
            count += 1

        logger.info(f"파싱 완료: {count}개 파일")
        return convert(etree.tostring(folder, encoding="unicode"), representation)

    def extract(self, request: ParseRequest) -> str:
        """
        파싱 요청을 실행

        Args:
            request: 프로젝트 또는 파일 파싱 요청

        Returns:
            str: 요청된 표현 형식의 AST
        """
        if isinstance(request, ProjectRequest):
            return self.parse_folder(request.project_path, request.representation)
        elif isinstance(request, FileRequest):
            return self.parse_file(request.file_path, request.representation)
        raise TypeError(f"알 수 없는 요청 유형입니다: {type(request).__name__}")
