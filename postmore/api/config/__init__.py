"""Config API module."""

from .ConfigError import ConfigError
from .PostMoreConfig import PostMoreConfig
from .get_home_dir import get_home_dir
from .get_package_version import get_package_version

__all__ = [
    "ConfigError",
    "PostMoreConfig",
    "get_home_dir",
    "get_package_version",
]
