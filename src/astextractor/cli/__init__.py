from .argument_parser import RawArguments, build_request, parse_arguments, parse_request
from .cli_controller import CLIController, main

__all__ = [
    "CLIController",
    "RawArguments",
    "build_request",
    "main",
    "parse_arguments",
    "parse_request",
]
