"""
Format Converter 모듈

AST XML 문서를 들여쓰기된 XML 또는 JSON으로 변환합니다.
JSON 변환 규칙은 org.json의 XML.toJSONObject를 따릅니다:
- 텍스트만 가진 요소는 문자열 값 (빈 요소는 "")
- 속성은 키로 변환
- 자식 요소와 함께 있는 텍스트는 "content" 키
- 같은 이름의 형제 요소는 리스트
"""

import json
from typing import Any, Dict

from lxml import etree

from ..models.parse_request import Representation

DEFAULT_INDENT = 3
CONTENT_KEY = "content"


class FormatConversionError(Exception):
    """XML 문서를 변환할 수 없을 때 발생하는 예외"""

    pass


def _parse_xml(xml: str) -> etree._Element:
    """XML 문자열을 공백 텍스트를 제거하며 파싱"""
    parser = etree.XMLParser(remove_blank_text=True, huge_tree=True)
    try:
        return etree.fromstring(xml.encode("utf-8"), parser)
    except etree.XMLSyntaxError as e:
        raise FormatConversionError(f"XML 형식이 올바르지 않습니다: {e}")


def format_xml(xml: str, indent: int = DEFAULT_INDENT) -> str:
    """
    XML 문자열을 들여쓰기하여 다시 직렬화

    Args:
        xml: XML 문자열
        indent: 들여쓰기 공백 수

    Returns:
        str: 들여쓰기된 XML 문자열 (XML 선언 없음)
    """
    root = _parse_xml(xml)
    etree.indent(root, space=" " * indent)
    return etree.tostring(root, encoding="unicode")


def _tag_name(element: etree._Element) -> str:
    """네임스페이스를 제외한 요소 이름"""
    return etree.QName(element).localname


def _accumulate(target: Dict[str, Any], key: str, value: Any) -> None:
    """키가 이미 있으면 리스트로 누적"""
    if key not in target:
        target[key] = value
    elif isinstance(target[key], list):
        target[key].append(value)
    else:
        target[key] = [target[key], value]


def _element_to_value(element: etree._Element) -> Any:
    """요소를 JSON 값(문자열 또는 딕셔너리)으로 변환"""
    children = list(element.iterchildren(tag=etree.Element))
    text = (element.text or "").strip()

    if not children and not element.attrib:
        return text

    result: Dict[str, Any] = {}
    for key, value in element.attrib.items():
        _accumulate(result, key, value)
    if text:
        _accumulate(result, CONTENT_KEY, text)

    for child in children:
        _accumulate(result, _tag_name(child), _element_to_value(child))
        tail = (child.tail or "").strip()
        if tail:
            _accumulate(result, CONTENT_KEY, tail)
    return result


def to_json(xml: str, indent: int = DEFAULT_INDENT) -> str:
    """
    XML 문자열을 JSON 문자열로 변환

    Args:
        xml: XML 문자열
        indent: 들여쓰기 공백 수

    Returns:
        str: JSON 문자열
    """
    root = _parse_xml(xml)
    document = {_tag_name(root): _element_to_value(root)}
    return json.dumps(document, ensure_ascii=False, indent=indent)


def convert(xml: str, representation: Representation) -> str:
    """
    XML 문자열을 요청된 표현 형식으로 변환

    Args:
        xml: XML 문자열
        representation: 출력 표현 형식

    Returns:
        str: 변환된 문자열
    """
    if representation is Representation.XML:
        return format_xml(xml)
    elif representation is Representation.JSON:
        return to_json(xml)
    raise ValueError(f"지원하지 않는 표현 형식입니다: {representation}")
