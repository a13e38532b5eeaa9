import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Optional

import click

from xmldocexamples.cli.ui import ClickUserInterface, UserInterface
from xmldocexamples.cli.ui_helpers import CLIUIHelpers
from xmldocexamples.services.extraction import ExampleExtractionService, ExtractionSummary


DEFAULT_LOG_FILE = "./log/app.log"
DEFAULT_FORMAT = "table"
SHOW_BANNER = True

OUTPUT_FORMATS = ("table", "plain")


def configure_logging(log_file: str = DEFAULT_LOG_FILE) -> None:
    """Send DEBUG logging to ``log_file``, creating its directory if needed."""

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        filename=log_file,
    )


@dataclass
class RunConfiguration:
    """Configuration flags for a run of the CLI."""

    pattern: Optional[str] = None
    output_format: str = DEFAULT_FORMAT
    log_file: str = DEFAULT_LOG_FILE
    show_banner: Optional[bool] = None


class ExampleCLI:

    def __init__(
        self,
        *,
        ui: Optional[UserInterface] = None,
        extraction: Optional[ExampleExtractionService] = None,
        helpers: Optional[CLIUIHelpers] = None,
    ):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.ui = ui or ClickUserInterface()
        self.extraction = extraction or ExampleExtractionService()
        self.helpers = helpers or CLIUIHelpers()

    def echo(self, message: str = "", *, nl: bool = True) -> None:
        self.ui.echo(message, nl=nl)

    def display_banner(self) -> None:
        self.helpers.display_banner(self.echo)

    def extract(self, pattern: str) -> ExtractionSummary:
        self.logger.info("Extracting example code for pattern %r", pattern)
        try:
            summary = self.extraction.extract(pattern)
        except (ValueError, OSError, ET.ParseError) as exc:
            self.logger.error("Extraction failed for pattern %r: %s", pattern, exc)
            raise click.ClickException(str(exc)) from exc
        self.logger.info(
            "Extracted %d example(s) from %d member(s)",
            summary.example_count,
            summary.member_count,
        )
        return summary

    def print_summary(self, summary: ExtractionSummary, output_format: str = DEFAULT_FORMAT) -> None:
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {output_format}")

        if summary.examples:
            if output_format == "table":
                self.echo(self.helpers.render_table(summary.table))
            else:
                for block in self.helpers.render_plain(summary.examples):
                    self.echo(block)

        self.echo(f"{summary.example_count} example(s) from {summary.member_count} member(s)")

    def run(self, config: RunConfiguration) -> ExtractionSummary:
        show_banner = config.show_banner if config.show_banner is not None else SHOW_BANNER
        if show_banner:
            self.display_banner()

        summary = self.extract(config.pattern)
        self.print_summary(summary, config.output_format)
        return summary


def main(
    config: Optional[RunConfiguration] = None,
    *,
    ui: Optional[UserInterface] = None,
    cli: Optional[ExampleCLI] = None,
    cli_factory: Optional[Any] = None,
) -> ExtractionSummary:
    """Entrypoint for both interactive and scripted runs of the CLI."""

    configuration = config or RunConfiguration()
    configure_logging(configuration.log_file)

    if cli_factory is None:
        cli_factory = lambda: ExampleCLI(ui=ui)

    cmd = cli or cli_factory()
    return cmd.run(configuration)
