"""Output renderers for command results.

Provides abstraction and implementations for writing search results to
console or JSON, and a factory to instantiate writers from configuration.
"""

from __future__ import annotations

from SorinPrimo.config import AppConfig
from SorinPrimo.renderers.base import MultiOutputWriter, OutputWriter
from SorinPrimo.renderers.console import ConsoleOutputWriter, render_text
from SorinPrimo.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        Appropriate OutputWriter instance for configured formats.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
