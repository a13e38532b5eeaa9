"""Service layer wrappers for orchestrating the CLI."""

from .extraction import ExampleExtractionService, ExtractionSummary

__all__ = [
    "ExampleExtractionService",
    "ExtractionSummary",
]
