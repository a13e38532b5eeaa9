"""Parsing of example code from compiler XML documentation."""

from .io import FileSystemService, GlobberService
from .parser import (
    ExampleCode,
    XmlDocExampleCodeParser,
    XmlDocFileNotFoundError,
    clean_code,
    parse_example_code,
    parse_example_code_files,
)

__all__ = [
    "ExampleCode",
    "FileSystemService",
    "GlobberService",
    "XmlDocExampleCodeParser",
    "XmlDocFileNotFoundError",
    "clean_code",
    "parse_example_code",
    "parse_example_code_files",
]
