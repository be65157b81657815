"""Exporter framework: Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Callable, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sheetcut.domain import OptimizationResult


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all result exporters.

    Attributes:
        format_name: Registry name of the format (e.g., "svg", "dxf").
        file_extension: File extension without leading dot.
        media_type: MIME type used when the export is served over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, result: OptimizationResult, path: Path) -> None:
        """Export an optimization result to a file."""
        ...

    def export_string(self, result: OptimizationResult) -> str:
        """Export an optimization result as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Central registry of exporter classes keyed by format name.

    Example:
        @ExporterRegistry.register("svg")
        class SvgExporter:
            format_name = "svg"
            file_extension = "svg"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Callable[[type], type]:
        """Class decorator registering an exporter under ``format_name``."""

        def decorator(exporter_class: type) -> type:
            if format_name in cls._exporters:
                logger.warning(
                    "Overwriting existing exporter for format '%s'", format_name
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(
                "Registered exporter '%s': %s", format_name, exporter_class.__name__
            )
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Remove every registration. Used by tests."""
        cls._exporters.clear()


class ExportManager:
    """Writes one result to several formats in a single directory.

    Files are named ``{project_name}_{format}.{ext}``.

    Attributes:
        output_dir: Directory for exported files, created on demand.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        result: OptimizationResult,
        project_name: str = "cutting-job",
    ) -> dict[str, Path]:
        """Export a result to every requested format.

        Args:
            formats: Registered format names.
            result: The optimization result to export.
            project_name: Base name for output files.

        Returns:
            Mapping of format name to written file.

        Raises:
            KeyError: If any format is not registered.
            OSError: If a file cannot be written.
        """
        # Resolve every format before touching the filesystem
        exporter_classes = {name: ExporterRegistry.get(name) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes.items():
            exporter = exporter_class()
            filepath = (
                self.output_dir
                / f"{project_name}_{format_name}.{exporter.file_extension}"
            )
            logger.info("Exporting to %s: %s", format_name, filepath)
            exporter.export(result, filepath)
            written[format_name] = filepath
        return written

    def export_single(
        self,
        format_name: str,
        result: OptimizationResult,
        project_name: str = "cutting-job",
    ) -> Path:
        return self.export_all([format_name], result, project_name)[format_name]
