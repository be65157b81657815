"""Job file configuration: schema, loading, validation and conversion."""

from sheetcut.application.config.adapter import (
    config_to_optimizer_options,
    config_to_pieces,
    config_to_stock_sheets,
)
from sheetcut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from sheetcut.application.config.schema import (
    SUPPORTED_VERSIONS,
    CuttingJobConfig,
    OptimizerOptionsConfig,
    PieceConfig,
    StockSheetConfig,
)
from sheetcut.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "CuttingJobConfig",
    "OptimizerOptionsConfig",
    "PieceConfig",
    "StockSheetConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_optimizer_options",
    "config_to_pieces",
    "config_to_stock_sheets",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
