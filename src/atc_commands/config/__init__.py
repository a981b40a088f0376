# Configuration package

from atc_commands.config.app_config import (
    CustomSchemeConfig,
    EngineConfig,
    load_config,
)

__all__ = [
    "CustomSchemeConfig",
    "EngineConfig",
    "load_config",
]
