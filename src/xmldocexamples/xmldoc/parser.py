"""Extraction of example code blocks from compiler XML documentation files."""

from __future__ import annotations

import errno
import logging
import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator, List, Optional

from xmldocexamples.xmldoc.io import FileSystemService, GlobberService, PathType

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\r\n"

_LINE_BREAK = re.compile(r"[\r\n]")


@dataclass(frozen=True)
class ExampleCode:
    """Example code attached to a documented API member."""

    member_name: Optional[str]
    code: str


class XmlDocFileNotFoundError(FileNotFoundError):
    """Raised when the XML documentation file to parse does not exist."""


def clean_code(text: Optional[str]) -> str:
    """Drop blank lines from ``text`` and join the rest with CRLF.

    Lines are kept verbatim: no trimming and no de-indentation.
    """

    if not text:
        return ""
    lines = (line for line in _LINE_BREAK.split(text) if line.strip())
    return LINE_SEPARATOR.join(lines)


def iter_example_code(root: ET.Element) -> Iterator[ExampleCode]:
    """Yield example code found under ``doc/members/member/example/code``."""

    docs = [root] if root.tag == "doc" else []
    for doc in docs:
        for members in doc.iterfind("members"):
            for member in members.iterfind("member"):
                member_name = member.get("name")
                for example in member.iterfind("example"):
                    for code in example.iterfind("code"):
                        yield ExampleCode(member_name, clean_code("".join(code.itertext())))


class XmlDocExampleCodeParser:
    """Parser for example code embedded in XML documentation files."""

    def __init__(
        self,
        file_system: Optional[FileSystemService] = None,
        globber: Optional[GlobberService] = None,
    ) -> None:
        self.file_system = file_system or FileSystemService()
        self.globber = globber or GlobberService()

    def parse(self, xml_file_path: Optional[PathType]) -> List[ExampleCode]:
        """Parse the example code of a single XML documentation file.

        Raises
        ------
        ValueError
            If ``xml_file_path`` is ``None`` or empty.
        XmlDocFileNotFoundError
            If the file does not exist.
        xml.etree.ElementTree.ParseError
            If the file is not well-formed XML.
        """

        if xml_file_path is None or not os.fspath(xml_file_path):
            raise ValueError("Invalid xml file path supplied.")

        path = os.fspath(xml_file_path)
        if not self.file_system.exists(xml_file_path):
            raise XmlDocFileNotFoundError(errno.ENOENT, "Supplied xml file not found", path)

        logger.debug("Parsing example code from %s", path)
        with self.file_system.open_read(xml_file_path) as stream:
            root = ET.parse(stream).getroot()
            examples = list(iter_example_code(root))

        logger.debug("Found %d example(s) in %s", len(examples), path)
        return examples

    def parse_files(self, pattern: Optional[str]) -> List[ExampleCode]:
        """Parse the example code of every file matching ``pattern``.

        The first file that fails to parse aborts the whole batch.
        """

        if pattern is None or not pattern.strip():
            raise ValueError("Invalid pattern supplied.")

        paths = self.globber.get_files(pattern)
        logger.info("Pattern %r matched %d file(s)", pattern, len(paths))

        examples: List[ExampleCode] = []
        for path in paths:
            examples.extend(self.parse(path))
        return examples


def parse_example_code(
    xml_file_path: Optional[PathType],
    *,
    file_system: Optional[FileSystemService] = None,
) -> List[ExampleCode]:
    """Parse example code from a single XML documentation file."""

    return XmlDocExampleCodeParser(file_system=file_system).parse(xml_file_path)


def parse_example_code_files(
    pattern: Optional[str],
    *,
    file_system: Optional[FileSystemService] = None,
    globber: Optional[GlobberService] = None,
) -> List[ExampleCode]:
    """Parse example code from every XML documentation file matching ``pattern``."""

    return XmlDocExampleCodeParser(file_system=file_system, globber=globber).parse_files(pattern)


__all__ = [
    "ExampleCode",
    "XmlDocExampleCodeParser",
    "XmlDocFileNotFoundError",
    "clean_code",
    "iter_example_code",
    "parse_example_code",
    "parse_example_code_files",
]
