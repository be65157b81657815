"""Tests for sheetcut domain value objects."""

import pytest

from sheetcut.domain import (
    Piece,
    PlacedPiece,
    Rect,
    RemainingPiece,
    SheetInstance,
    StockSheet,
    UnitPiece,
)


class TestStockSheet:
    """Tests for StockSheet validation and properties."""

    def test_area(self) -> None:
        """Area should be width times height."""
        assert StockSheet(label="A", width=200, height=50).area == 10000

    def test_defaults(self) -> None:
        """Quantity defaults to 1 and kerf to 0."""
        sheet = StockSheet(label="A", width=10, height=10)
        assert sheet.quantity == 1
        assert sheet.kerf == 0.0
        assert sheet.id is None

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 10)])
    def test_non_positive_dimensions_rejected(self, width: float, height: float) -> None:
        """Zero or negative dimensions should raise ValueError."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            StockSheet(label="A", width=width, height=height)

    def test_negative_quantity_rejected(self) -> None:
        """Negative quantity should raise ValueError."""
        with pytest.raises(ValueError, match="quantity"):
            StockSheet(label="A", width=10, height=10, quantity=-1)

    def test_zero_quantity_allowed(self) -> None:
        """A sheet type may be listed with nothing in stock."""
        assert StockSheet(label="A", width=10, height=10, quantity=0).quantity == 0

    def test_negative_kerf_rejected(self) -> None:
        """Negative kerf should raise ValueError."""
        with pytest.raises(ValueError, match="Kerf"):
            StockSheet(label="A", width=10, height=10, kerf=-0.5)


class TestPiece:
    """Tests for Piece validation."""

    def test_rotation_allowed_by_default(self) -> None:
        """Pieces may be rotated unless told otherwise."""
        assert Piece(label="P", width=10, height=20).allow_rotation is True

    def test_non_positive_dimensions_rejected(self) -> None:
        """Zero width should raise ValueError."""
        with pytest.raises(ValueError):
            Piece(label="P", width=0, height=20)

    def test_negative_quantity_rejected(self) -> None:
        """Negative quantity should raise ValueError."""
        with pytest.raises(ValueError):
            Piece(label="P", width=10, height=20, quantity=-2)


class TestInstanceKeys:
    """Tests for SheetInstance and UnitPiece identities."""

    def test_sheet_key_uses_id(self) -> None:
        """A sheet with an id should key instances by that id."""
        instance = SheetInstance(StockSheet(label="A", width=1, height=1, id="s"), 2)
        assert instance.key == "s-2"

    def test_sheet_key_falls_back_to_position(self) -> None:
        """A sheet without an id should key instances by input position."""
        instance = SheetInstance(StockSheet(label="A", width=1, height=1), 0, 3)
        assert instance.key == "sheet3-0"

    def test_unit_key_uses_id(self) -> None:
        """A piece with an id should key units by that id."""
        unit = UnitPiece(Piece(label="P", width=1, height=1, id="door"), 1)
        assert unit.key == "door-1"

    def test_unit_keys_distinct_for_same_label(self) -> None:
        """Two pieces sharing a label still get distinct keys."""
        a = UnitPiece(Piece(label="P", width=1, height=1), 0, 0)
        b = UnitPiece(Piece(label="P", width=2, height=2), 0, 1)
        assert a.key != b.key

    @pytest.mark.parametrize("reserved", ["sheet0", "sheet1", "sheet42"])
    def test_sheet_id_in_fallback_form_rejected(self, reserved: str) -> None:
        """An explicit id could otherwise equal another sheet's fallback key."""
        with pytest.raises(ValueError, match="reserved"):
            StockSheet(label="A", width=1, height=1, id=reserved)

    @pytest.mark.parametrize("reserved", ["piece0", "piece1", "piece42"])
    def test_piece_id_in_fallback_form_rejected(self, reserved: str) -> None:
        """An explicit id could otherwise equal another piece's fallback key."""
        with pytest.raises(ValueError, match="reserved"):
            Piece(label="P", width=1, height=1, id=reserved)

    @pytest.mark.parametrize(
        "allowed", ["sheet", "sheet-1", "sheet1a", "piece1", "Sheet1"]
    )
    def test_similar_sheet_ids_allowed(self, allowed: str) -> None:
        """Only the exact fallback form is reserved, and only for its own kind."""
        assert StockSheet(label="A", width=1, height=1, id=allowed).id == allowed

    def test_unit_delegates_dimensions(self) -> None:
        """UnitPiece should expose the source piece's dimensions."""
        unit = UnitPiece(Piece(label="P", width=3, height=4, allow_rotation=False), 0)
        assert (unit.label, unit.width, unit.height, unit.area) == ("P", 3, 4, 12)
        assert unit.allow_rotation is False


class TestRect:
    """Tests for Rect overlap semantics."""

    def test_overlapping(self) -> None:
        """Rectangles sharing area overlap."""
        assert Rect(0, 0, 10, 10).overlaps(Rect(5, 5, 10, 10))

    def test_touching_edges_do_not_overlap(self) -> None:
        """Rectangles sharing only an edge do not overlap."""
        assert not Rect(0, 0, 10, 10).overlaps(Rect(10, 0, 10, 10))
        assert not Rect(0, 0, 10, 10).overlaps(Rect(0, 10, 10, 10))

    def test_touching_corner_does_not_overlap(self) -> None:
        """Rectangles sharing only a corner do not overlap."""
        assert not Rect(0, 0, 10, 10).overlaps(Rect(10, 10, 5, 5))

    def test_containment_overlaps(self) -> None:
        """A rectangle inside another overlaps it."""
        assert Rect(0, 0, 10, 10).overlaps(Rect(2, 2, 1, 1))


class TestPlacedPiece:
    """Tests for PlacedPiece geometry."""

    @pytest.fixture
    def unit(self) -> UnitPiece:
        return UnitPiece(Piece(label="P", width=500, height=200), 0)

    def test_unrotated_dimensions(self, unit: UnitPiece) -> None:
        """Unrotated pieces keep their width and height."""
        placed = PlacedPiece(unit, 0, 0)
        assert (placed.placed_width, placed.placed_height) == (500, 200)

    def test_rotated_dimensions(self, unit: UnitPiece) -> None:
        """Rotated pieces swap width and height."""
        placed = PlacedPiece(unit, 0, 0, rotated=True)
        assert (placed.placed_width, placed.placed_height) == (200, 500)
        assert placed.rect == Rect(0, 0, 200, 500)

    def test_area_unchanged_by_rotation(self, unit: UnitPiece) -> None:
        """Rotation does not change area."""
        assert PlacedPiece(unit, 0, 0, rotated=True).area == 100000

    def test_negative_position_rejected(self, unit: UnitPiece) -> None:
        """Negative coordinates should raise ValueError."""
        with pytest.raises(ValueError):
            PlacedPiece(unit, -1, 0)


class TestRemainingPiece:
    """Tests for RemainingPiece."""

    def test_area(self) -> None:
        """Area should be width times height."""
        offcut = RemainingPiece(width=600, height=1000, x=400, y=0, sheet_label="A")
        assert offcut.area == 600000

    def test_non_positive_dimensions_rejected(self) -> None:
        """Zero-size offcuts should raise ValueError."""
        with pytest.raises(ValueError):
            RemainingPiece(width=0, height=10, x=0, y=0, sheet_label="A")
