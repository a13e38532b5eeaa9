"""Extract example code snippets from compiler XML documentation files."""

from xmldocexamples.xmldoc import (
    ExampleCode,
    XmlDocExampleCodeParser,
    XmlDocFileNotFoundError,
    clean_code,
    parse_example_code,
    parse_example_code_files,
)

__version__ = "1.0.0"

__all__ = [
    "ExampleCode",
    "XmlDocExampleCodeParser",
    "XmlDocFileNotFoundError",
    "clean_code",
    "parse_example_code",
    "parse_example_code_files",
]
