"""
Configuration Manager 단위 테스트

다음 시나리오를 검증합니다:
1. 속성 파일이 없을 때 기본 설정 (모든 노드 출력)
2. 노드 종류별 true/false 설정 파싱
3. OMIT, LEAF 목록 파싱
4. 주석, 빈 줄, 줄 이어쓰기 처리
5. 잘못된 형식 및 파일 없음 예외 처리
"""

import pytest

from astextractor.config.config_manager import (
    ConfigurationError,
    ExtractorProperties,
    load_properties,
    parse_properties,
)


@pytest.fixture
def write_properties(tmp_path):
    """임시 속성 파일을 생성하는 픽스처"""

    def _write(content: str, name: str = "ASTExtractor.properties"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


def test_default_properties_include_everything():
    """속성 파일이 지정되지 않으면 모든 노드가 포함됨"""
    for path in (None, ""):
        properties = load_properties(path)

        assert properties == ExtractorProperties()
        assert properties.includes("class_declaration")
        assert properties.includes("line_comment")
        assert not properties.is_leaf("class_body")


def test_node_kind_flags(write_properties):
    """노드 종류별 포함 여부 파싱"""
    path = write_properties(
        "line_comment=false\n"
        "block_comment = no\n"
        "class_declaration: true\n"
        "field_declaration=1\n"
    )

    properties = load_properties(path)

    assert not properties.includes("line_comment")
    assert not properties.includes("block_comment")
    assert properties.includes("class_declaration")
    assert properties.includes("field_declaration")
    assert properties.includes("method_declaration")


def test_omit_and_leaf_lists(write_properties):
    """OMIT, LEAF 목록 파싱"""
    path = write_properties(
        "OMIT = line_comment, block_comment\n"
        "LEAF=import_declaration,package_declaration\n"
    )

    properties = load_properties(path)

    assert properties.omit == ["line_comment", "block_comment"]
    assert properties.leaf == ["import_declaration", "package_declaration"]
    assert not properties.includes("block_comment")
    assert properties.is_leaf("package_declaration")
    assert properties.configured_kinds() == [
        "block_comment",
        "import_declaration",
        "line_comment",
        "package_declaration",
    ]


def test_comments_blank_lines_and_continuation(write_properties):
    """주석, 빈 줄, 줄 이어쓰기 처리"""
    path = write_properties(
        "# 주석\n"
        "! 다른 형식의 주석\n"
        "\n"
        "OMIT = line_comment, \\\n"
        "       block_comment\n"
    )

    properties = load_properties(path)

    assert properties.omit == ["line_comment", "block_comment"]


def test_last_value_wins():
    """같은 키가 반복되면 마지막 값이 사용됨"""
    entries = parse_properties("line_comment=false\nline_comment=true\n")

    assert entries == {"line_comment": "true"}


def test_line_without_separator(write_properties):
    """구분자가 없는 줄은 형식 오류"""
    path = write_properties("line_comment=false\nclass_declaration\n")

    with pytest.raises(ConfigurationError, match="2번째 줄"):
        load_properties(path)


def test_unterminated_continuation(write_properties):
    """마지막 줄이 '\\'로 끝나면 형식 오류"""
    path = write_properties("OMIT = line_comment, \\\n")

    with pytest.raises(ConfigurationError, match="완결되지 않았습니다"):
        load_properties(path)


def test_invalid_boolean(write_properties):
    """true/false가 아닌 값은 검증 실패"""
    path = write_properties("line_comment=maybe\n")

    with pytest.raises(ConfigurationError, match="속성 파일 검증 실패") as exc_info:
        load_properties(path)

    assert "line_comment" in str(exc_info.value)


def test_missing_file(tmp_path):
    """존재하지 않는 속성 파일"""
    with pytest.raises(ConfigurationError, match="속성 파일을 찾을 수 없습니다"):
        load_properties(tmp_path / "missing.properties")


def test_latin1_file(tmp_path):
    """UTF-8이 아닌 속성 파일 읽기"""
    path = tmp_path / "latin1.properties"
    path.write_bytes("# caf\xe9\nline_comment=false\n".encode("latin-1"))

    properties = load_properties(path)

    assert not properties.includes("line_comment")


def test_properties_are_immutable():
    """설정 객체는 생성 후 변경할 수 없음"""
    properties = ExtractorProperties(omit=["line_comment"])

    with pytest.raises(Exception):
        properties.omit = []
