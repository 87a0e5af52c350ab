"""
Global config registry for pogo_api.

This module provides a thread-safe registry for storing and accessing the
ApiConfig instance of the current run, so loaders and the generator can share
it without passing it through every call.
"""

import threading
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from pogo_api.config import ApiConfig

_config: Optional["ApiConfig"] = None
_lock = threading.Lock()


def set_config(config: "ApiConfig") -> None:
    """Set the global ApiConfig instance.

    Args:
        config: ApiConfig instance to use globally

    Example:
        >>> from pogo_api.config import ApiConfig
        >>> from pogo_api.utils.core.config_registry import set_config
        >>> config = ApiConfig(project_root=Path("."))
        >>> set_config(config)
    """
    global _config
    with _lock:
        _config = config


def get_config() -> "ApiConfig":
    """Get the global ApiConfig instance.

    Raises:
        RuntimeError: If config has not been set

    Returns:
        ApiConfig instance
    """
    with _lock:
        if _config is None:
            raise RuntimeError(
                "Config has not been set. Call set_config() first or pass config explicitly."
            )
        return _config


def has_config() -> bool:
    with _lock:
        return _config is not None


def clear_config() -> None:
    """Clear the global config (useful for testing)."""
    global _config
    with _lock:
        _config = None
