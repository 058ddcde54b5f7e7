"""
SourceFile 데이터 모델

수집된 Java 소스 파일의 경로 정보를 저장하는 데이터 모델입니다.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class SourceFile:
    """
    소스 파일 정보를 저장하는 데이터 모델

    Attributes:
        path: 파일의 절대 경로
        relative_path: 프로젝트 루트 기준 상대 경로 (플랫폼 경로 구분자 사용)
        filename: 파일명 (확장자 포함)
    """

    path: Path
    relative_path: str
    filename: str

    def __post_init__(self):
        """타입 변환"""
        if isinstance(self.path, str):
            self.path = Path(self.path)

