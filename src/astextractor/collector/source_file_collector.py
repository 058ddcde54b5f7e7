"""
Source File Collector 모듈

프로젝트 폴더의 모든 Java 소스 파일을 재귀적으로 탐색하고 상대 경로와 함께 수집합니다.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set, Union

from ..models.source_file import SourceFile

JAVA_EXTENSION = ".java"


def relative_path(root: Union[str, Path], path: Union[str, Path]) -> str:
    """
    프로젝트 루트 기준 상대 경로를 플랫폼 경로 구분자로 반환

    Args:
        root: 프로젝트 루트 경로
        path: 대상 파일 경로 (루트 하위 또는 루트 자체)

    Returns:
        str: 상대 경로 (대상이 루트 자체이면 파일명)

    Raises:
        ValueError: 대상이 루트 밖에 있는 경우
    """
    root = Path(root).absolute()
    path = Path(path).absolute()
    if path == root:
        return path.name
    return str(path.relative_to(root))


class SourceFileCollector:
    """
    Java 소스 파일을 수집하는 클래스

    주요 기능:
    1. 재귀적 파일 탐색
    2. 확장자 기반 필터링 (대소문자 구분 없음)
    3. 상대 경로 계산
    4. 상대 경로 사전순 정렬로 결정적인 순서 보장
    """

    def __init__(
        self,
        project_path: Union[str, Path],
        exclude_dirs: Optional[Iterable[str]] = None,
    ):
        """
        SourceFileCollector 초기화

        Args:
            project_path: 프로젝트 루트 경로
            exclude_dirs: 제외할 디렉터리 이름 목록 (기본값: 없음)
        """
        self._project_path = Path(project_path).absolute()
        self._excluded_dirs: Set[str] = set(exclude_dirs or [])

    @property
    def project_path(self) -> Path:
        """프로젝트 루트 절대 경로"""
        return self._project_path

    def collect(self) -> Iterator[SourceFile]:
        """
        Java 소스 파일을 수집하는 제너레이터

        Yields:
            SourceFile: 상대 경로 사전순으로 정렬된 소스 파일

        Raises:
            ValueError: 프로젝트 경로가 없거나 디렉터리가 아닌 경우
        """
        if not self._project_path.exists():
            raise ValueError(f"프로젝트 경로가 존재하지 않습니다: {self._project_path}")

        if not self._project_path.is_dir():
            raise ValueError(
                f"프로젝트 경로가 디렉터리가 아닙니다: {self._project_path}"
            )

        files = [
            file_path
            for file_path in self._project_path.rglob("*")
            if file_path.is_file() and self._should_collect(file_path)
        ]
        files.sort(key=lambda file_path: file_path.relative_to(self._project_path).parts)

        for file_path in files:
            yield SourceFile(
                path=file_path,
                relative_path=relative_path(self._project_path, file_path),
                filename=file_path.name,
            )

    def collect_all(self) -> List[SourceFile]:
        """
        모든 Java 소스 파일을 수집하여 리스트로 반환

        Returns:
            List[SourceFile]: 수집된 모든 소스 파일 목록
        """
        return list(self.collect())

    def _should_collect(self, file_path: Path) -> bool:
        """.java 확장자이고 제외 디렉터리 밖에 있는 파일인지 확인"""
        if file_path.suffix.lower() != JAVA_EXTENSION:
            return False
        if self._excluded_dirs:
            relative_parts = file_path.relative_to(self._project_path).parts[:-1]
            if any(part in self._excluded_dirs for part in relative_parts):
                return False
        return True
