"""Tests for turning offcuts back into stock."""

from sheetcut.domain import RemainingPiece, offcuts_to_stock


class TestOffcutsToStock:
    """Tests for offcuts_to_stock."""

    def test_one_sheet_per_offcut(self) -> None:
        """Each offcut becomes a single-quantity stock sheet."""
        offcuts = [
            RemainingPiece(width=600, height=1000, x=400, y=0, sheet_label="Float", id="r-0"),
            RemainingPiece(width=400, height=700, x=0, y=300, sheet_label="Float", id="r-1"),
        ]
        stock = offcuts_to_stock(offcuts, kerf=3)
        assert [(s.width, s.height, s.quantity, s.kerf) for s in stock] == [
            (600, 1000, 1, 3),
            (400, 700, 1, 3),
        ]
        assert [s.id for s in stock] == ["r-0", "r-1"]
        assert stock[0].label == "Offcut 600x1000 (Float)"

    def test_missing_id_becomes_none(self) -> None:
        """An offcut without an id gives a stock sheet without an id."""
        offcut = RemainingPiece(width=150, height=120.5, x=0, y=0, sheet_label="S")
        [sheet] = offcuts_to_stock([offcut])
        assert sheet.id is None
        assert sheet.label == "Offcut 150x120.5 (S)"

    def test_empty(self) -> None:
        """No offcuts give no stock."""
        assert offcuts_to_stock([]) == []
