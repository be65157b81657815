"""Tests for result serialization."""

import json

from sheetcut.domain import OptimizationResult, StockSheet, optimize, Piece, OptimizerOptions
from sheetcut.infrastructure import (
    result_from_dict,
    result_from_json,
    result_to_dict,
    result_to_json,
    stock_sheets_to_dicts,
)


class TestResultToDict:
    """Tests for the dictionary form."""

    def test_summary_fields(self, multi_sheet_result: OptimizationResult) -> None:
        """Summary metrics are included for readers."""
        data = result_to_dict(multi_sheet_result)
        assert data["total_sheets"] == 2
        assert data["placed_count"] == 2
        assert data["budget_exhausted"] is False
        assert data["efficiency"] == multi_sheet_result.efficiency
        assert data["area_weighted_waste"] == multi_sheet_result.area_weighted_waste

    def test_layout_fields(self, single_piece_result: OptimizationResult) -> None:
        """Each placement carries its key, position and placed size."""
        layout = result_to_dict(single_piece_result)["layouts"][0]
        assert layout["sheet"]["key"] == "sheet0-0"
        assert layout["sheet"]["stock"]["label"] == "Glass"
        placed = layout["placed_pieces"][0]
        assert placed["key"] == "piece0-0"
        assert (placed["x"], placed["y"], placed["rotated"]) == (0, 0, False)
        assert (placed["placed_width"], placed["placed_height"]) == (400, 300)
        assert len(layout["remaining_pieces"]) == 2

    def test_unplaced_pieces(self, multi_sheet_result: OptimizationResult) -> None:
        """Unplaced units are listed with their source piece."""
        [unplaced] = result_to_dict(multi_sheet_result)["unplaced_pieces"]
        assert unplaced["piece"]["label"] == "Huge"
        assert unplaced["source_index"] == 1

    def test_is_json_compatible(self, multi_sheet_result: OptimizationResult) -> None:
        """The dictionary survives json.dumps."""
        json.dumps(result_to_dict(multi_sheet_result))


class TestRoundTrip:
    """Rebuilding results from their serialized form."""

    def test_dict_round_trip(self, multi_sheet_result: OptimizationResult) -> None:
        """A result rebuilt from its dict equals the original."""
        assert result_from_dict(result_to_dict(multi_sheet_result)) == multi_sheet_result

    def test_json_round_trip_with_rotation_and_offcuts(self) -> None:
        """Rotation, kerf, ids and offcuts survive a JSON round trip."""
        result = optimize(
            [StockSheet(label="A", width=300, height=600, kerf=2, id="oak")],
            [Piece(label="P", width=500, height=200, id="rail")],
        )
        restored = result_from_json(result_to_json(result))
        assert restored == result
        assert restored.layouts[0].placed_pieces[0].rotated is True

    def test_budget_flag_round_trip(self) -> None:
        """The budget flag is restored."""
        result = optimize(
            [StockSheet(label="A", width=1000, height=1000)],
            [Piece(label="P", width=100, height=100, quantity=2)],
            OptimizerOptions(max_iterations=2),
        )
        assert result_from_json(result_to_json(result)).budget_exhausted is True

    def test_derived_keys_ignored(self, single_piece_result: OptimizationResult) -> None:
        """Tampered derived values do not affect the rebuilt result."""
        data = result_to_dict(single_piece_result)
        data["total_sheets"] = 99
        data["layouts"][0]["placed_pieces"][0]["placed_width"] = -1
        assert result_from_dict(data) == single_piece_result


class TestStockSheetsToDicts:
    """Tests for job-file form of stock sheets."""

    def test_drops_missing_id(self) -> None:
        """Sheets without an id omit the key."""
        [data] = stock_sheets_to_dicts([StockSheet(label="A", width=10, height=20)])
        assert data == {
            "label": "A",
            "width": 10,
            "height": 20,
            "quantity": 1,
            "kerf": 0.0,
        }

    def test_keeps_id(self) -> None:
        """Sheets with an id keep it."""
        [data] = stock_sheets_to_dicts(
            [StockSheet(label="A", width=10, height=20, id="r-1")]
        )
        assert data["id"] == "r-1"
