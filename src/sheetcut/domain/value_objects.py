"""Immutable value objects for stock sheets, pieces, and placements.

Coordinates are measured from the bottom-left corner of a sheet. All lengths
share one unit (typically millimeters) and are never converted internally.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Keys of records without an id; explicit ids may not take this form
AUTO_SHEET_ID = re.compile(r"sheet\d+")
AUTO_PIECE_ID = re.compile(r"piece\d+")


@dataclass(frozen=True)
class StockSheet:
    """A type of stock sheet available for cutting.

    Attributes:
        label: Human-readable name shown in reports.
        width: Sheet width.
        height: Sheet height.
        quantity: Number of identical physical sheets available.
        kerf: Clearance reserved to the right of and above each placed piece.
        id: Optional caller-supplied identity. Ids of the form ``sheet<N>``
            are reserved for the keys of sheets without an id.
    """

    label: str
    width: float
    height: float
    quantity: int = 1
    kerf: float = 0.0
    id: str | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Stock sheet dimensions must be positive")
        if self.quantity < 0:
            raise ValueError("Stock sheet quantity must be non-negative")
        if self.kerf < 0:
            raise ValueError("Kerf must be non-negative")
        if self.id is not None and AUTO_SHEET_ID.fullmatch(self.id):
            raise ValueError(
                f"Sheet id '{self.id}' is reserved for sheets without an id"
            )

    @property
    def area(self) -> float:
        """Area of a single sheet of this type."""
        return self.width * self.height


@dataclass(frozen=True)
class Piece:
    """A required piece with the number of copies to cut.

    Attributes:
        label: Human-readable name shown in reports.
        width: Piece width.
        height: Piece height.
        quantity: Number of identical pieces required.
        id: Optional caller-supplied identity. Ids of the form ``piece<N>``
            are reserved for the keys of pieces without an id.
        allow_rotation: False locks the piece to its given orientation
            (e.g. grain-sensitive material).
    """

    label: str
    width: float
    height: float
    quantity: int = 1
    id: str | None = None
    allow_rotation: bool = True

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Piece dimensions must be positive")
        if self.quantity < 0:
            raise ValueError("Piece quantity must be non-negative")
        if self.id is not None and AUTO_PIECE_ID.fullmatch(self.id):
            raise ValueError(
                f"Piece id '{self.id}' is reserved for pieces without an id"
            )

    @property
    def area(self) -> float:
        """Area of a single piece."""
        return self.width * self.height


@dataclass(frozen=True)
class SheetInstance:
    """One physical sheet expanded from a StockSheet.

    Attributes:
        sheet: The stock sheet type this instance belongs to.
        index: Zero-based index among instances of the same type.
        source_index: Position of the sheet type in the input list.
    """

    sheet: StockSheet
    index: int
    source_index: int = 0

    @property
    def key(self) -> str:
        """Identity of this instance, unique within one optimization call."""
        base = self.sheet.id if self.sheet.id is not None else f"sheet{self.source_index}"
        return f"{base}-{self.index}"

    @property
    def label(self) -> str:
        return self.sheet.label

    @property
    def width(self) -> float:
        return self.sheet.width

    @property
    def height(self) -> float:
        return self.sheet.height

    @property
    def kerf(self) -> float:
        return self.sheet.kerf

    @property
    def area(self) -> float:
        return self.sheet.area


@dataclass(frozen=True)
class UnitPiece:
    """One physical piece expanded from a Piece.

    Attributes:
        piece: The requested piece this unit belongs to.
        index: Zero-based index among units of the same piece.
        source_index: Position of the piece in the input list.
    """

    piece: Piece
    index: int
    source_index: int = 0

    @property
    def key(self) -> str:
        """Identity of this unit, unique within one optimization call."""
        base = self.piece.id if self.piece.id is not None else f"piece{self.source_index}"
        return f"{base}-{self.index}"

    @property
    def label(self) -> str:
        return self.piece.label

    @property
    def width(self) -> float:
        return self.piece.width

    @property
    def height(self) -> float:
        return self.piece.height

    @property
    def area(self) -> float:
        return self.piece.area

    @property
    def allow_rotation(self) -> bool:
        return self.piece.allow_rotation


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its bottom-left corner."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def overlaps(self, other: Rect) -> bool:
        """True if the two rectangles share a region of positive area.

        Rectangles that only touch along an edge or at a corner do not overlap.
        """
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.top
            and self.top > other.y
        )


@dataclass(frozen=True)
class PlacedPiece:
    """A unit piece committed to a position on a sheet.

    Attributes:
        piece: The unit piece being placed.
        x: Horizontal offset from the sheet's left edge.
        y: Vertical offset from the sheet's bottom edge.
        rotated: True if the piece is turned 90 degrees.
    """

    piece: UnitPiece
    x: float
    y: float
    rotated: bool = False

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def placed_width(self) -> float:
        """Width of piece as placed (accounts for rotation)."""
        return self.piece.height if self.rotated else self.piece.width

    @property
    def placed_height(self) -> float:
        """Height of piece as placed (accounts for rotation)."""
        return self.piece.width if self.rotated else self.piece.height

    @property
    def area(self) -> float:
        """True piece area, without kerf."""
        return self.placed_width * self.placed_height

    @property
    def rect(self) -> Rect:
        """The piece's own footprint, without kerf."""
        return Rect(self.x, self.y, self.placed_width, self.placed_height)


@dataclass(frozen=True)
class RemainingPiece:
    """A reusable offcut left on a finished sheet.

    Attributes:
        width: Offcut width.
        height: Offcut height.
        x: Horizontal offset of the offcut on its sheet.
        y: Vertical offset of the offcut on its sheet.
        sheet_label: Label of the sheet the offcut came from.
        id: Identity of the offcut within the result.
    """

    width: float
    height: float
    x: float
    y: float
    sheet_label: str
    id: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Offcut dimensions must be positive")

    @property
    def area(self) -> float:
        return self.width * self.height
