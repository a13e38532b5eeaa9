"""Command-line interface entry points for the example code extractor."""

from __future__ import annotations

import click

from .app import DEFAULT_FORMAT, DEFAULT_LOG_FILE, OUTPUT_FORMATS, ExampleCLI, RunConfiguration, main as _app_main


@click.command()
@click.argument("pattern")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=DEFAULT_FORMAT,
    show_default=True,
    help="How extracted examples are printed.",
)
@click.option("--log-file", type=str, default=DEFAULT_LOG_FILE, show_default=True, help="File receiving debug logs.")
@click.option("--banner/--no-banner", "show_banner", default=None, help="Show the banner before the results.")
def main(
    pattern: str,
    output_format: str,
    log_file: str,
    show_banner: bool | None,
) -> None:
    """Extract example code from XML documentation files matching PATTERN."""

    configuration = RunConfiguration(
        pattern=pattern,
        output_format=output_format,
        log_file=log_file,
        show_banner=show_banner,
    )
    _app_main(config=configuration)


__all__ = ["ExampleCLI", "RunConfiguration", "main"]
