"""
Argument Parser 모듈

-project=, -file=, -properties=, -repr= 형식의 명령줄 인자를 파싱하고
파싱 요청(ProjectRequest 또는 FileRequest)을 생성합니다.
"""

import argparse
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from ..models.parse_request import (
    FileRequest,
    ParseRequest,
    ProjectRequest,
    Representation,
    UsageError,
)


@dataclass(frozen=True)
class RawArguments:
    """
    검증 전의 명령줄 인자 값 (지정되지 않은 값은 빈 문자열)
    """

    project: str = ""
    file: str = ""
    properties: str = ""
    repr: str = ""


class _ArgumentParser(argparse.ArgumentParser):
    """에러 시 종료하지 않고 UsageError를 발생시키는 파서"""

    def error(self, message: str):
        raise UsageError(message)


# "-옵션=값" 형태의 토큰만 인식
OPTION_TOKEN_PATTERN = re.compile(r"^-(project|file|properties|repr)=")


def _create_parser() -> argparse.ArgumentParser:
    """-project, -file, -properties, -repr 옵션 파서 생성"""
    parser = _ArgumentParser(prog="astextractor", add_help=False, allow_abbrev=False)
    for name in ("project", "file", "properties", "repr"):
        parser.add_argument(f"-{name}", dest=name, type=str, default="")
    return parser


def _strip_quotes(value: str) -> str:
    """값을 감싼 큰따옴표 제거"""
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def parse_arguments(tokens: Sequence[str]) -> RawArguments:
    """
    명령줄 토큰을 파싱

    "-project=", "-file=", "-properties=", "-repr=" 로 시작하는 토큰만 인식하고
    나머지 토큰(값이 분리된 "-project foo" 형태 포함)은 무시합니다.
    같은 옵션이 여러 번 나오면 마지막 값이 사용됩니다.

    Args:
        tokens: 명령줄 토큰 목록

    Returns:
        RawArguments: 파싱된 인자 값
    """
    option_tokens = [token for token in tokens if OPTION_TOKEN_PATTERN.match(token)]
    namespace = _create_parser().parse_args(option_tokens)
    return RawArguments(
        project=_strip_quotes(namespace.project),
        file=_strip_quotes(namespace.file),
        properties=_strip_quotes(namespace.properties),
        repr=_strip_quotes(namespace.repr),
    )


def build_request(arguments: RawArguments) -> ParseRequest:
    """
    파싱된 인자로부터 파싱 요청을 생성

    Args:
        arguments: 파싱된 인자 값

    Returns:
        ParseRequest: ProjectRequest 또는 FileRequest

    Raises:
        UsageError: -project와 -file 중 정확히 하나가 지정되지 않았거나,
            -repr 값이 XML 또는 JSON이 아닌 경우
    """
    if bool(arguments.project) == bool(arguments.file):
        raise UsageError("-project와 -file 중 정확히 하나를 지정해야 합니다")

    representation = Representation.from_code(arguments.repr)
    properties_path = Path(arguments.properties) if arguments.properties else None

    if arguments.project:
        return ProjectRequest(
            project_path=Path(arguments.project),
            properties_path=properties_path,
            representation=representation,
        )
    return FileRequest(
        file_path=Path(arguments.file),
        properties_path=properties_path,
        representation=representation,
    )


def parse_request(tokens: List[str]) -> ParseRequest:
    """명령줄 토큰에서 바로 파싱 요청을 생성"""
    return build_request(parse_arguments(tokens))
