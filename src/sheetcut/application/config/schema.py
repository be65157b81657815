"""Pydantic schema for cutting job files.

A job file lists the available stock sheets, the required pieces, and
optional optimizer settings:

    {
      "schema_version": "1.0",
      "project_name": "kitchen-glass",
      "stock_sheets": [
        {"label": "Float 2000x1000", "width": 2000, "height": 1000,
         "quantity": 3, "kerf": 3}
      ],
      "pieces": [
        {"label": "Door", "width": 400, "height": 700, "quantity": 4}
      ],
      "options": {"min_offcut_size": 150}
    }
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from sheetcut.domain.value_objects import AUTO_PIECE_ID, AUTO_SHEET_ID

# Version 1.0: Initial job format
# Version 1.1: Per-piece allow_rotation and search budget options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class StockSheetConfig(BaseModel):
    """A stock sheet type and how many are available.

    Attributes:
        id: Optional identity carried into layouts and offcut ids.
        label: Display name.
        width: Sheet width (positive).
        height: Sheet height (positive).
        quantity: Number of sheets available (non-negative).
        kerf: Blade clearance around each cut (non-negative).
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, description="Optional sheet identity")
    label: str = Field(..., min_length=1, description="Sheet label")
    width: float = Field(..., gt=0, description="Sheet width")
    height: float = Field(..., gt=0, description="Sheet height")
    quantity: int = Field(default=1, ge=0, description="Sheets available")
    kerf: float = Field(default=0.0, ge=0, description="Blade kerf width")

    @field_validator("id")
    @classmethod
    def validate_not_reserved(cls, v: str | None) -> str | None:
        """Reject ids that could equal the key of a sheet without an id."""
        if v is not None and AUTO_SHEET_ID.fullmatch(v):
            raise ValueError(
                f"Sheet id '{v}' is reserved for sheets without an id"
            )
        return v


class PieceConfig(BaseModel):
    """A required piece and how many copies to cut.

    Attributes:
        id: Optional identity carried into placement keys.
        label: Display name.
        width: Piece width (positive).
        height: Piece height (positive).
        quantity: Number of copies required (non-negative).
        allow_rotation: Whether the piece may be turned 90 degrees.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, description="Optional piece identity")
    label: str = Field(..., min_length=1, description="Piece label")
    width: float = Field(..., gt=0, description="Piece width")
    height: float = Field(..., gt=0, description="Piece height")
    quantity: int = Field(default=1, ge=0, description="Copies required")
    allow_rotation: bool = Field(
        default=True, description="Allow 90 degree rotation"
    )

    @field_validator("id")
    @classmethod
    def validate_not_reserved(cls, v: str | None) -> str | None:
        """Reject ids that could equal the key of a piece without an id."""
        if v is not None and AUTO_PIECE_ID.fullmatch(v):
            raise ValueError(
                f"Piece id '{v}' is reserved for pieces without an id"
            )
        return v


class OptimizerOptionsConfig(BaseModel):
    """Optimizer settings.

    Attributes:
        grid_size: Cell size for offcut detection.
        min_offcut_size: Minimum width and height of a reported offcut.
        max_iterations: Cap on placement attempts (null for none).
        time_budget_seconds: Wall-clock cap (null for none).
    """

    model_config = ConfigDict(extra="forbid")

    grid_size: float = Field(default=10.0, gt=0, description="Offcut grid cell size")
    min_offcut_size: float = Field(
        default=100.0, ge=0, description="Minimum offcut dimension"
    )
    max_iterations: int | None = Field(
        default=None, ge=1, description="Maximum placement attempts"
    )
    time_budget_seconds: float | None = Field(
        default=None, gt=0, description="Maximum search time in seconds"
    )


class CuttingJobConfig(BaseModel):
    """Root configuration model for a cutting job.

    Example:
        >>> config = CuttingJobConfig(
        ...     schema_version="1.0",
        ...     stock_sheets=[StockSheetConfig(label="A", width=1000, height=1000)],
        ...     pieces=[PieceConfig(label="P", width=400, height=300)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    project_name: str = Field(default="cutting-job", min_length=1)
    stock_sheets: list[StockSheetConfig] = Field(default_factory=list)
    pieces: list[PieceConfig] = Field(default_factory=list)
    options: OptimizerOptionsConfig = Field(default_factory=OptimizerOptionsConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted for
        forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
