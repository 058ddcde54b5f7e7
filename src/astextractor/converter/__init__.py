from .format_converter import FormatConversionError, convert, format_xml, to_json

__all__ = ["FormatConversionError", "convert", "format_xml", "to_json"]
