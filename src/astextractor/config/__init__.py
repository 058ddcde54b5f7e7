from .config_manager import (
    ConfigurationError,
    ExtractorProperties,
    load_properties,
    parse_properties,
)

__all__ = [
    "ConfigurationError",
    "ExtractorProperties",
    "load_properties",
    "parse_properties",
]
