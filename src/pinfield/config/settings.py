"""
Configuration settings for the pin field engine and its Qt demo.
"""
import os
import sys
import configparser
from pathlib import Path


def get_config_path() -> Path:
    """Get the path to config.ini file."""
    override = os.getenv("PINFIELD_CONFIG")
    if override:
        return Path(override)
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent / 'config.ini'
    # Current working directory first, then the project root next to src/
    cwd_path = Path.cwd() / 'config.ini'
    if cwd_path.exists():
        return cwd_path
    return Path(__file__).parent.parent.parent.parent / 'config.ini'


def load_config() -> configparser.ConfigParser:
    """Load configuration from config.ini file."""
    config = configparser.ConfigParser()
    config_path = get_config_path()
    if config_path.exists():
        config.read(config_path, encoding='utf-8')
    return config


_config = load_config()


class AppSettings:
    """Application configuration settings."""

    # Application metadata
    APP_NAME = "PinField"
    APP_VERSION = "1.0.0"
    APP_TITLE = "PinField v1.0.0 (Qt)"

    # Demo window dimensions
    WINDOW_WIDTH = 420
    WINDOW_HEIGHT = 240

    # Code entry defaults
    SLOT_COUNT = int(_config.get('pinfield', 'slot_count',
                                 fallback=os.getenv("PINFIELD_SLOT_COUNT", "4")))
    VALID_CHARACTERS = _config.get('pinfield', 'valid_characters',
                                   fallback=os.getenv("PINFIELD_VALID_CHARACTERS", "0123456789"))
    TOKEN = _config.get('pinfield', 'token',
                        fallback=os.getenv("PINFIELD_TOKEN", "•"))
    # Delay before cursor/focus is recomputed after a render pass
    FOCUS_DELAY_MS = int(_config.get('pinfield', 'focus_delay_ms',
                                     fallback=os.getenv("PINFIELD_FOCUS_DELAY_MS", "10")))

    # Appearance
    KERNING = float(_config.get('appearance', 'kerning',
                                fallback=os.getenv("PINFIELD_KERNING", "20.0")))
    FONT_SIZE = int(_config.get('appearance', 'font_size',
                                fallback=os.getenv("PINFIELD_FONT_SIZE", "40")))

    # Demo window
    DEMO_CODE = os.getenv("PINFIELD_DEMO_CODE", "1234")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE", "pinfield.log")
    LOG_MAX_SIZE = int(os.getenv("LOG_MAX_SIZE", "10485760"))   # 10 MB
    LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "5"))

    # File paths
    CONFIG_DIR = Path(os.getenv("PINFIELD_HOME", str(Path.home() / ".pinfield")))
    LOG_DIR = CONFIG_DIR / "logs"

    @classmethod
    def ensure_directories(cls):
        """Ensure required directories exist."""
        for directory in [cls.CONFIG_DIR, cls.LOG_DIR]:
            directory.mkdir(parents=True, exist_ok=True)

    @classmethod
    def default_configuration(cls):
        """Build a validated PinConfiguration from the configured defaults."""
        from pinfield.core.configuration import PinConfiguration
        return PinConfiguration(
            slot_count=cls.SLOT_COUNT,
            valid_characters=cls.VALID_CHARACTERS,
            token=cls.TOKEN,
        )


# Global settings instance
settings = AppSettings()
