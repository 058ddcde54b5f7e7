from .source_file_collector import SourceFileCollector, relative_path

__all__ = ["SourceFileCollector", "relative_path"]
