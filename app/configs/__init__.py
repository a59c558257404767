from app.configs.settings import (
    CONFIG_MAP,
    Argon2Config,
    LimiterConfig,
    Settings,
    settings,
)

__all__ = [
    "Argon2Config",
    "CONFIG_MAP",
    "LimiterConfig",
    "Settings",
    "settings",
]
