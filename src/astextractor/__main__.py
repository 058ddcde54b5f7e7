"""
ASTExtractor CLI 진입점

실행:
  python -m astextractor -file="path/to/File.java" -repr=JSON

또는 설치 후:
  astextractor -project="path/to/project" -properties="path/to/file.properties"
"""

from .cli.cli_controller import main

if __name__ == "__main__":
    main()
