from ddgbot.config.manager import ConfigManager, apply_log_settings
from ddgbot.config.settings import (
    APP_SETTINGS,
    AppSettings,
    LogSettings,
    RenderSettings,
    SearchSettings,
)

__all__ = [
    'APP_SETTINGS',
    'AppSettings',
    'ConfigManager',
    'LogSettings',
    'RenderSettings',
    'SearchSettings',
    'apply_log_settings',
]
