"""Pytest configuration and shared fixtures for sheetcut tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from sheetcut.domain import OptimizationResult, Piece, StockSheet, optimize


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Job data
# =============================================================================


@pytest.fixture
def job_data() -> dict[str, Any]:
    """A small job that places every piece on one sheet."""
    return {
        "schema_version": "1.0",
        "project_name": "kitchen-glass",
        "stock_sheets": [
            {"id": "float", "label": "Float 1000x1000", "width": 1000, "height": 1000}
        ],
        "pieces": [
            {"label": "Door", "width": 400, "height": 300, "quantity": 2},
            {"label": "Shelf", "width": 200, "height": 200},
        ],
    }


@pytest.fixture
def write_job(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write job data to a JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "job.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


# =============================================================================
# Optimization results
# =============================================================================


@pytest.fixture
def single_piece_result() -> OptimizationResult:
    """One 400x300 piece on one 1000x1000 sheet (88% waste, two offcuts)."""
    return optimize(
        [StockSheet(label="Glass", width=1000, height=1000)],
        [Piece(label="Pane", width=400, height=300)],
    )


@pytest.fixture
def multi_sheet_result() -> OptimizationResult:
    """Two sheets used, one piece left over."""
    return optimize(
        [StockSheet(label="Glass", width=1000, height=1000, quantity=2, kerf=3)],
        [
            Piece(label="Big", width=900, height=900, quantity=2),
            Piece(label="Huge", width=2000, height=100),
        ],
    )
