"""
Configuration Manager 모듈

AST에 포함할 노드 종류를 지정하는 속성 파일(.properties)을 로드하고 검증합니다.
속성 파일은 프로그램 시작 시 한 번만 로드되며, 로드된 설정 객체는 파서에 명시적으로 전달됩니다.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

# 속성 파일을 읽을 때 시도할 인코딩 (Java properties 기본 인코딩은 latin-1)
PROPERTIES_ENCODINGS = ["utf-8", "latin-1"]

# 노드 종류가 아닌 예약 키
OMIT_KEY = "OMIT"
LEAF_KEY = "LEAF"


class ConfigurationError(Exception):
    """설정 관련 에러를 나타내는 사용자 정의 예외 클래스"""

    pass


class ExtractorProperties(BaseModel):
    """
    AST 노드 필터 설정

    노드 종류별 포함 여부를 담으며, 지정되지 않은 노드 종류는 기본적으로 포함됩니다.
    """

    model_config = ConfigDict(frozen=True)

    node_kinds: Dict[str, bool] = Field(
        default_factory=dict, description="노드 종류별 포함 여부"
    )
    omit: List[str] = Field(
        default_factory=list, description="하위 트리와 함께 제외할 노드 종류 목록"
    )
    leaf: List[str] = Field(
        default_factory=list,
        description="자식 노드를 펼치지 않고 소스 텍스트만 출력할 노드 종류 목록",
    )

    @field_validator("omit", "leaf", mode="before")
    @classmethod
    def _split_kind_list(cls, value):
        """쉼표로 구분된 문자열을 목록으로 변환"""
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    def includes(self, kind: str) -> bool:
        """
        노드 종류가 출력 대상인지 확인

        Args:
            kind: 노드 종류 이름

        Returns:
            bool: 출력 대상이면 True
        """
        if kind in self.omit:
            return False
        return self.node_kinds.get(kind, True)

    def is_leaf(self, kind: str) -> bool:
        """노드 종류를 리프로 출력해야 하는지 확인"""
        return kind in self.leaf

    def configured_kinds(self) -> List[str]:
        """설정 파일에 언급된 모든 노드 종류 이름을 반환"""
        return sorted(set(self.node_kinds) | set(self.omit) | set(self.leaf))


def _read_properties_text(path: Path) -> str:
    """속성 파일을 지원되는 인코딩으로 읽음"""
    for encoding in PROPERTIES_ENCODINGS:
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ConfigurationError(
        f"속성 파일을 읽을 수 없습니다: 지원되는 인코딩을 찾을 수 없습니다 ({path})"
    )


def _split_entry(line: str) -> Optional[Tuple[str, str]]:
    """
    "key=value" 또는 "key: value" 형태의 한 줄을 분리

    Returns:
        Optional[Tuple[str, str]]: (키, 값), 구분자가 없으면 None
    """
    for index, char in enumerate(line):
        if char in "=:":
            key = line[:index].strip()
            if not key:
                return None
            return key, line[index + 1 :].strip()
    return None


def parse_properties(text: str) -> Dict[str, str]:
    """
    Java properties 형식의 텍스트를 키-값 딕셔너리로 변환

    '#' 또는 '!'로 시작하는 줄은 주석이며, 줄 끝의 '\\'는 다음 줄로 이어집니다.
    같은 키가 여러 번 나오면 마지막 값이 사용됩니다.

    Args:
        text: 속성 파일 내용

    Returns:
        Dict[str, str]: 키-값 딕셔너리

    Raises:
        ConfigurationError: 구분자가 없는 줄이 있거나 마지막 줄이 '\\'로 끝나는 경우
    """
    entries: Dict[str, str] = {}
    logical_line = ""
    start_line_no = 0

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not logical_line:
            if not line or line[0] in "#!":
                continue
            start_line_no = line_no

        if line.endswith("\\"):
            logical_line += line[:-1]
            continue
        logical_line += line

        entry = _split_entry(logical_line)
        if entry is None:
            raise ConfigurationError(
                f"속성 파일 {start_line_no}번째 줄의 형식이 올바르지 않습니다: {logical_line}"
            )
        key, value = entry
        entries[key] = value
        logical_line = ""

    if logical_line:
        raise ConfigurationError(
            f"속성 파일 {start_line_no}번째 줄이 '\\'로 끝나 완결되지 않았습니다"
        )
    return entries


def load_properties(
    properties_path: Optional[Union[str, Path]] = None,
) -> ExtractorProperties:
    """
    속성 파일을 로드하여 노드 필터 설정을 생성합니다.

    Args:
        properties_path: 속성 파일 경로 (None 또는 빈 문자열이면 모든 노드를 출력하는 기본 설정)

    Returns:
        ExtractorProperties: 로드된 설정 객체

    Raises:
        ConfigurationError: 파일이 없거나, 읽을 수 없거나, 형식이 올바르지 않은 경우
    """
    if properties_path is None or str(properties_path) == "":
        return ExtractorProperties()

    path = Path(properties_path)
    if not path.is_file():
        raise ConfigurationError(f"속성 파일을 찾을 수 없습니다: {path}")

    try:
        entries = parse_properties(_read_properties_text(path))
    except OSError as e:
        raise ConfigurationError(f"속성 파일을 읽는 중 오류가 발생했습니다: {e}")

    node_kinds: Dict[str, str] = {}
    config_data: Dict[str, object] = {"node_kinds": node_kinds}
    for key, value in entries.items():
        if key == OMIT_KEY:
            config_data["omit"] = value
        elif key == LEAF_KEY:
            config_data["leaf"] = value
        else:
            node_kinds[key] = value

    try:
        properties = ExtractorProperties(**config_data)
    except ValidationError as e:
        error_messages = []
        for error in e.errors():
            loc = " -> ".join(map(str, error["loc"]))
            msg = error["msg"]
            if error["type"].startswith("bool"):
                msg = f"true/false 값이어야 합니다 (입력값: {error.get('input')!r})"
            error_messages.append(f"  - 항목: {loc}, 원인: {msg}")

        formatted_error = "\n".join(error_messages)
        raise ConfigurationError(f"속성 파일 검증 실패:\n{formatted_error}")

    logger.debug(
        f"속성 파일 로드 완료: {path} (제외 {len(properties.omit)}개, 리프 {len(properties.leaf)}개, "
        f"개별 설정 {len(properties.node_kinds)}개)"
    )
    return properties
