"""
nflverse_fetch Configuration

This module provides configuration management for dataset downloads and caching.
It includes environment variable loading, configuration validation, and the
process-wide settings holder used by the module-level convenience functions.
"""

import os
import threading
from enum import Enum
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field, replace
from dotenv import load_dotenv

from . import __version__

# Load environment variables
load_dotenv()


class CacheMode(Enum):
    """Storage tier used for downloaded tables."""

    MEMORY = "memory"
    FILESYSTEM = "filesystem"
    OFF = "off"

    @classmethod
    def from_string(cls, value: str) -> 'CacheMode':
        """Parse a tier name case-insensitively; unknown names fall back to memory."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.MEMORY


def default_cache_dir() -> Path:
    """Per-user cache directory for the filesystem tier."""
    base = os.getenv("XDG_CACHE_HOME")
    if base:
        return Path(base) / "nflverse_fetch"
    return Path.home() / ".cache" / "nflverse_fetch"


DEFAULT_USER_AGENT = f"nflverse/nflverse_fetch {__version__}"


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class NFLReadConfig:
    """Configuration for nflverse dataset downloads."""

    # Caching
    cache_mode: CacheMode = CacheMode.MEMORY
    cache_dir: Path = field(default_factory=default_cache_dir)
    cache_duration: int = 86400

    # HTTP settings
    timeout: int = 120
    user_agent: str = DEFAULT_USER_AGENT

    # Logging. verbose reports each download at INFO on the nflverse_fetch
    # loggers; the CLI installs a handler, library callers configure logging.
    verbose: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> 'NFLReadConfig':
        """Create configuration from environment variables."""
        defaults = cls()
        cache_mode = os.getenv("NFLVERSE_CACHE")
        cache_dir = os.getenv("NFLVERSE_CACHE_DIR")
        verbose = os.getenv("NFLVERSE_VERBOSE")
        return cls(
            cache_mode=CacheMode.from_string(cache_mode) if cache_mode is not None else defaults.cache_mode,
            cache_dir=Path(cache_dir) if cache_dir else defaults.cache_dir,
            cache_duration=_env_int("NFLVERSE_CACHE_DURATION", defaults.cache_duration),
            timeout=_env_int("NFLVERSE_TIMEOUT", defaults.timeout),
            user_agent=os.getenv("NFLVERSE_USER_AGENT", defaults.user_agent),
            verbose=verbose is not None and verbose.lower() in ("1", "true"),
            log_level=os.getenv("NFLVERSE_LOG_LEVEL", defaults.log_level),
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.cache_duration < 0:
            raise ValueError("cache_duration must be non-negative")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'cache_mode': self.cache_mode.value,
            'cache_dir': str(self.cache_dir),
            'cache_duration': self.cache_duration,
            'timeout': self.timeout,
            'user_agent': self.user_agent,
            'verbose': self.verbose,
            'log_level': self.log_level,
        }


# Process-wide configuration, read from the environment on first use
_config: Optional[NFLReadConfig] = None
_config_lock = threading.Lock()


def get_config() -> NFLReadConfig:
    """Get the active configuration."""
    global _config
    with _config_lock:
        if _config is None:
            _config = NFLReadConfig.from_env()
        return _config


def update_config(config: NFLReadConfig) -> None:
    """Replace the active configuration as a whole."""
    global _config
    config.validate()
    with _config_lock:
        _config = config


def reset_config() -> None:
    """Forget the active configuration so the environment is read again."""
    global _config
    with _config_lock:
        _config = None


def create_config(**kwargs) -> NFLReadConfig:
    """Create a custom configuration without installing it."""
    config = NFLReadConfig.from_env()
    overrides = {key: value for key, value in kwargs.items() if hasattr(config, key)}
    if isinstance(overrides.get('cache_mode'), str):
        overrides['cache_mode'] = CacheMode.from_string(overrides['cache_mode'])
    if 'cache_dir' in overrides:
        overrides['cache_dir'] = Path(overrides['cache_dir'])
    config = replace(config, **overrides)
    config.validate()
    return config
