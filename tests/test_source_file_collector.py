"""
Source File Collector 단위 테스트

다음 시나리오를 검증합니다:
1. .java 파일만 수집
2. 재귀적 탐색이 모든 하위 디렉터리 포함
3. 상대 경로 계산
4. 결정적인 수집 순서
5. 잘못된 프로젝트 경로 처리
"""

import os
from pathlib import Path

import pytest

from astextractor.collector.source_file_collector import SourceFileCollector, relative_path


@pytest.fixture
def temp_project_dir(tmp_path):
    """임시 프로젝트 디렉터리를 생성하는 픽스처"""
    project_path = tmp_path / "test_project"
    (project_path / "src" / "main" / "java").mkdir(parents=True)
    (project_path / "src" / "main" / "resources").mkdir(parents=True)
    (project_path / "target").mkdir()

    (project_path / "Root.java").write_text("public class Root {}")
    (project_path / "src" / "main" / "java" / "Main.java").write_text("public class Main {}")
    (project_path / "src" / "main" / "java" / "Service.java").write_text("public class Service {}")
    (project_path / "src" / "main" / "java" / "Upper.JAVA").write_text("public class Upper {}")
    (project_path / "target" / "Generated.java").write_text("public class Generated {}")

    (project_path / "src" / "main" / "resources" / "mapper.xml").write_text("<mapper></mapper>")
    (project_path / "README.txt").write_text("readme")
    (project_path / "target" / "Main.class").write_text("compiled")

    return project_path


def test_collect_java_files_only(temp_project_dir):
    """.java 파일만 수집되는지 확인"""
    files = SourceFileCollector(temp_project_dir).collect_all()

    filenames = {f.filename for f in files}
    assert filenames == {"Root.java", "Main.java", "Service.java", "Upper.JAVA", "Generated.java"}


def test_collect_recursive_relative_paths(temp_project_dir):
    """하위 디렉터리 파일의 상대 경로 확인"""
    files = SourceFileCollector(temp_project_dir).collect_all()

    relative_paths = {f.relative_path for f in files}
    assert "Root.java" in relative_paths
    assert os.path.join("src", "main", "java", "Main.java") in relative_paths
    assert os.path.join("target", "Generated.java") in relative_paths


def test_collect_absolute_paths(temp_project_dir):
    """수집된 경로가 절대 경로인지 확인"""
    for source_file in SourceFileCollector(temp_project_dir).collect():
        assert source_file.path.is_absolute()
        assert source_file.path.is_file()


def test_collect_order_is_lexicographic(temp_project_dir):
    """상대 경로 사전순으로 수집되는지 확인"""
    files = SourceFileCollector(temp_project_dir).collect_all()

    parts = [Path(f.relative_path).parts for f in files]
    assert parts == sorted(parts)
    assert [f.filename for f in files] == [
        "Root.java",
        "Main.java",
        "Service.java",
        "Upper.JAVA",
        "Generated.java",
    ]


def test_collect_is_deterministic(temp_project_dir):
    """반복 수집 결과가 동일한지 확인"""
    first = [(f.path, f.relative_path) for f in SourceFileCollector(temp_project_dir).collect()]
    second = [(f.path, f.relative_path) for f in SourceFileCollector(temp_project_dir).collect()]

    assert first == second


def test_collect_relative_project_path(temp_project_dir, monkeypatch):
    """상대 경로로 지정된 프로젝트도 절대 경로로 처리되는지 확인"""
    monkeypatch.chdir(temp_project_dir.parent)

    files = SourceFileCollector("test_project").collect_all()

    assert len(files) == 5
    assert all(f.path.is_absolute() for f in files)


def test_exclude_dirs(temp_project_dir):
    """제외 디렉터리 설정 확인"""
    files = SourceFileCollector(temp_project_dir, exclude_dirs=["target"]).collect_all()

    assert "Generated.java" not in {f.filename for f in files}
    assert len(files) == 4


def test_empty_project(tmp_path):
    """Java 파일이 없는 프로젝트"""
    assert SourceFileCollector(tmp_path).collect_all() == []


def test_nonexistent_project_path(tmp_path):
    """존재하지 않는 프로젝트 경로"""
    collector = SourceFileCollector(tmp_path / "missing")

    with pytest.raises(ValueError, match="프로젝트 경로가 존재하지 않습니다"):
        collector.collect_all()


def test_project_path_is_file(tmp_path):
    """프로젝트 경로가 파일인 경우"""
    file_path = tmp_path / "A.java"
    file_path.write_text("class A {}")

    with pytest.raises(ValueError, match="디렉터리가 아닙니다"):
        SourceFileCollector(file_path).collect_all()


def test_relative_path_at_root(tmp_path):
    """루트 바로 아래 파일의 상대 경로는 파일명"""
    assert relative_path(tmp_path, tmp_path / "A.java") == "A.java"


def test_relative_path_two_levels_deep(tmp_path):
    """두 단계 아래 파일의 상대 경로는 중간 디렉터리를 포함"""
    result = relative_path(tmp_path, tmp_path / "pkg" / "sub" / "B.java")

    assert result == os.path.join("pkg", "sub", "B.java")


def test_relative_path_of_root_itself(tmp_path):
    """루트 자체의 상대 경로는 이름"""
    file_path = tmp_path / "A.java"

    assert relative_path(file_path, file_path) == "A.java"


def test_relative_path_outside_root(tmp_path):
    """루트 밖의 경로"""
    with pytest.raises(ValueError):
        relative_path(tmp_path / "a", tmp_path / "b" / "C.java")
