"""
CLI Controller 모듈

명령줄 인자를 파싱 요청으로 변환하고, 속성 파일 로드, AST 추출, 결과 출력을 수행합니다.
인자가 잘못된 경우 사용법을 출력하고 파싱은 수행하지 않습니다.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from ..config.config_manager import ConfigurationError, load_properties
from ..converter.format_converter import FormatConversionError
from ..extractor import ASTExtractor
from ..models.parse_request import ParseRequest, UsageError
from ..parser.java_ast_parser import JavaParseError
from .argument_parser import parse_request

# 종료 코드
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

USAGE_MESSAGE = """ASTExtractor: Abstract Syntax Tree Extractor for Java Source Code

Run as:
 astextractor -project="path/to/project" -properties="path/to/propertiesfile" -repr=XML|JSON
Or as:
 astextractor -file="path/to/file" -properties="path/to/propertiesfile" -repr=XML|JSON
where -properties allows setting the location of the properties file (default is no properties so all syntax tree nodes are returned)
and -repr allows selecting the representation of the tree (default is XML)"""


class CLIController:
    """
    CLI 명령을 파싱하고 실행하는 컨트롤러 클래스

    주요 기능:
    1. 인자 파싱: -project/-file 중 하나와 -properties, -repr 옵션 해석
    2. 사용법 출력: 인자가 잘못된 경우 사용법을 표준 출력으로 출력
    3. 에러 처리: 설정, 파싱, 입출력 에러를 종료 코드로 변환
    4. 로깅: 모든 작업을 로그 파일에 기록 (표준 출력은 결과 전용)
    """

    def __init__(self):
        """CLIController 초기화"""
        self.logger = self._setup_logging()

    def _setup_logging(self) -> logging.Logger:
        """
        로깅 설정

        로그 디렉터리와 콘솔 로그 레벨은 ASTEXTRACTOR_LOG_DIR, ASTEXTRACTOR_LOG_LEVEL
        환경 변수로 지정할 수 있습니다.

        Returns:
            logging.Logger: 설정된 로거
        """
        log_dir = Path(os.getenv("ASTEXTRACTOR_LOG_DIR", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = (
            log_dir / f"astextractor_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )

        logger = logging.getLogger("astextractor")
        logger.setLevel(logging.DEBUG)

        # 이전 실행에서 등록된 핸들러 정리
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        # 콘솔 핸들러 (stderr)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(os.getenv("ASTEXTRACTOR_LOG_LEVEL", "INFO").upper())
        console_formatter = logging.Formatter("%(levelname)s - %(message)s")
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        return logger

    def print_usage(self) -> None:
        """사용법 출력"""
        print(USAGE_MESSAGE)

    def parse_args(self, args: Optional[List[str]] = None) -> ParseRequest:
        """
        명령줄 인자 파싱

        Args:
            args: 파싱할 인자 리스트 (None이면 sys.argv 사용)

        Returns:
            ParseRequest: 파싱 요청

        Raises:
            UsageError: 인자가 없거나 잘못된 경우
        """
        if args is None:
            args = sys.argv[1:]
        if not args:
            raise UsageError("인자가 지정되지 않았습니다")
        return parse_request(args)

    def execute(self, args: Optional[List[str]] = None) -> int:
        """
        CLI 명령 실행

        Args:
            args: 명령줄 인자 리스트 (None이면 sys.argv 사용)

        Returns:
            int: 종료 코드 (0: 성공, 1: 실패, 2: 인자 오류)
        """
        try:
            request = self.parse_args(args)
        except UsageError as e:
            self.logger.debug(f"인자 오류: {e}")
            self.print_usage()
            return EXIT_USAGE

        try:
            properties = load_properties(request.properties_path)
            if request.properties_path is not None:
                self.logger.info(f"속성 파일 로드 성공: {request.properties_path}")

            extractor = ASTExtractor(properties)
            result = extractor.extract(request)
            print(result)
            return EXIT_SUCCESS

        except ConfigurationError as e:
            self.logger.error(f"속성 파일 로드 실패: {e}")
            return EXIT_FAILURE
        except JavaParseError as e:
            self.logger.error(f"Java 소스 파싱 실패: {e}")
            return EXIT_FAILURE
        except FormatConversionError as e:
            self.logger.error(f"출력 형식 변환 실패: {e}")
            return EXIT_FAILURE
        except (OSError, ValueError) as e:
            self.logger.error(f"파일을 처리할 수 없습니다: {e}")
            return EXIT_FAILURE
        except KeyboardInterrupt:
            self.logger.warning("사용자에 의해 중단되었습니다")
            return EXIT_FAILURE
        except Exception as e:
            self.logger.exception(f"실행 중 오류 발생: {e}")
            return EXIT_FAILURE


def main():
    """CLI 메인 함수"""
    load_dotenv(".env")

    controller = CLIController()
    exit_code = controller.execute()
    sys.exit(exit_code)
