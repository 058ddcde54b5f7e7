"""
ParseRequest 데이터 모델

명령줄 인자로부터 만들어지는 파싱 요청과 출력 표현 형식을 정의합니다.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union


class UsageError(Exception):
    """명령줄 인자가 잘못되었거나 서로 모순될 때 발생하는 예외"""

    pass


class Representation(str, Enum):
    """AST 출력 표현 형식"""

    XML = "XML"
    JSON = "JSON"

    @classmethod
    def from_code(cls, code: str) -> "Representation":
        """
        -repr 인자 값을 Representation으로 변환

        Args:
            code: 인자 값 (빈 문자열이면 기본값 XML)

        Returns:
            Representation: 변환된 표현 형식

        Raises:
            UsageError: "XML" 또는 "JSON"이 아닌 경우 (대소문자 구분)
        """
        if not code:
            return cls.XML
        for representation in cls:
            if representation.value == code:
                return representation
        raise UsageError(f"지원하지 않는 표현 형식입니다: {code}")


@dataclass(frozen=True)
class ProjectRequest:
    """
    프로젝트 폴더 전체를 파싱하는 요청

    Attributes:
        project_path: 프로젝트 폴더 경로
        properties_path: 속성 파일 경로 (없으면 None)
        representation: 출력 표현 형식
    """

    project_path: Path
    properties_path: Optional[Path] = None
    representation: Representation = Representation.XML


@dataclass(frozen=True)
class FileRequest:
    """
    단일 Java 파일을 파싱하는 요청

    Attributes:
        file_path: Java 파일 경로
        properties_path: 속성 파일 경로 (없으면 None)
        representation: 출력 표현 형식
    """

    file_path: Path
    properties_path: Optional[Path] = None
    representation: Representation = Representation.XML


ParseRequest = Union[ProjectRequest, FileRequest]
