"""JSON exporter for optimization results."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from sheetcut.infrastructure.exporters.base import ExporterRegistry
from sheetcut.infrastructure.serialization import result_to_dict

if TYPE_CHECKING:
    from sheetcut.domain import OptimizationResult


logger = logging.getLogger(__name__)

# Version of the exported document layout
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonExporter:
    """Exports the full result, readable back with ``result_from_dict``.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def to_dict(self, result: OptimizationResult) -> dict[str, Any]:
        return {"schema_version": SCHEMA_VERSION, **result_to_dict(result)}

    def export(self, result: OptimizationResult, path: Path) -> None:
        path.write_text(self.export_string(result), encoding="utf-8")
        logger.info("Exported JSON to %s", path)

    def export_string(self, result: OptimizationResult) -> str:
        return json.dumps(self.to_dict(result), indent=self.indent)
