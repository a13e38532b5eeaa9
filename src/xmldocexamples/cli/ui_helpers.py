"""Presentation helpers used by :mod:`xmldocexamples.cli.app`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

import pyfiglet
from tabulate import tabulate
from termcolor import colored

from xmldocexamples import __version__
from xmldocexamples.services.extraction import UNNAMED_MEMBER
from xmldocexamples.xmldoc.parser import LINE_SEPARATOR, ExampleCode


@dataclass
class BannerSections:
    """Structured representation of the CLI banner content."""

    heading: str
    footer_lines: list[str]


class CLIUIHelpers:
    """Utility helpers for rendering extracted examples and banners."""

    def render_banner(self, table_width: int = 75) -> BannerSections:
        """Return the banner text to display to the user."""

        banner_text = pyfiglet.figlet_format("XmlDoc Examples", font="slant")
        colored_banner = colored(banner_text, color="green")
        heading = tabulate([[colored_banner]], tablefmt="plain")
        footer_lines = [
            "=" * table_width,
            "XML documentation example code extractor".center(table_width),
            f"Version: {__version__}".center(table_width),
            "=" * table_width,
        ]
        return BannerSections(heading=heading, footer_lines=footer_lines)

    def display_banner(self, echo: Callable[[str], None], *, table_width: int = 75) -> None:
        """Display the CLI banner using the provided echo callback."""

        sections = self.render_banner(table_width=table_width)
        echo(sections.heading)
        for line in sections.footer_lines:
            echo(line)

    def render_table(self, table: Sequence[Sequence[str]]) -> str:
        """Render a header-first table of examples as a grid."""

        header, *rows = table
        return tabulate(rows, headers=header, tablefmt="fancy_grid")

    def render_plain(self, examples: Iterable[ExampleCode], *, color: Optional[str] = "cyan") -> List[str]:
        """Return one block of text per example: a coloured member heading then the code."""

        blocks = []
        for example in examples:
            heading = colored(example.member_name or UNNAMED_MEMBER, color=color, attrs=["bold"])
            blocks.append(f"{heading}{LINE_SEPARATOR}{example.code}{LINE_SEPARATOR}")
        return blocks


__all__ = ["CLIUIHelpers", "BannerSections"]
