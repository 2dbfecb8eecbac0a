"""Engine configuration: schema and JSON loader."""

from cabinetry.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cabinetry.application.config.schema import (
    SUPPORTED_VERSIONS,
    CatalogConfig,
    ConstructionConfig,
    EngineConfiguration,
    ExportConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CatalogConfig",
    "ConfigError",
    "ConstructionConfig",
    "EngineConfiguration",
    "ExportConfig",
    "load_config",
    "load_config_from_dict",
]
