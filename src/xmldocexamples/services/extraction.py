"""Service wrappers for extracting example code from XML documentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from xmldocexamples.xmldoc import parser as xmldoc_parser
from xmldocexamples.xmldoc.io import FileSystemService, GlobberService, PathType

UNNAMED_MEMBER = "<unnamed>"


@dataclass
class ExtractionSummary:
    """Example code extracted for a pattern, with a printable table."""

    examples: List[xmldoc_parser.ExampleCode]
    table: List[List[str]]

    @property
    def example_count(self) -> int:
        return len(self.examples)

    @property
    def member_count(self) -> int:
        return len({example.member_name for example in self.examples if example.member_name is not None})


class ExampleExtractionService:
    """Adapter around :mod:`xmldocexamples.xmldoc.parser`."""

    def __init__(
        self,
        *,
        file_system: Optional[FileSystemService] = None,
        globber: Optional[GlobberService] = None,
    ) -> None:
        self.parser = xmldoc_parser.XmlDocExampleCodeParser(file_system=file_system, globber=globber)

    def parse(self, xml_file_path: PathType) -> List[xmldoc_parser.ExampleCode]:
        return self.parser.parse(xml_file_path)

    def parse_files(self, pattern: str) -> List[xmldoc_parser.ExampleCode]:
        return self.parser.parse_files(pattern)

    def extract(self, pattern: str) -> ExtractionSummary:
        """Extract examples for ``pattern``, or for the file it names when one exists.

        A path to an existing file is parsed directly, so names holding glob
        characters such as ``Foo[1].xml`` are not expanded.
        """

        if pattern and self.parser.file_system.exists(pattern):
            examples = self.parse(pattern)
        else:
            examples = self.parse_files(pattern)
        return ExtractionSummary(examples=examples, table=self.build_table(examples))

    def build_table(self, examples: Sequence[xmldoc_parser.ExampleCode]) -> List[List[str]]:
        table = [["Member", "Code"]]
        for example in examples:
            table.append([example.member_name or UNNAMED_MEMBER, example.code])
        return table

    def group_by_member(
        self,
        examples: Sequence[xmldoc_parser.ExampleCode],
    ) -> Dict[Optional[str], List[xmldoc_parser.ExampleCode]]:
        grouped: Dict[Optional[str], List[xmldoc_parser.ExampleCode]] = {}
        for example in examples:
            grouped.setdefault(example.member_name, []).append(example)
        return grouped

    def __getattr__(self, item):
        return getattr(xmldoc_parser, item)


__all__ = ["ExampleExtractionService", "ExtractionSummary", "UNNAMED_MEMBER"]
