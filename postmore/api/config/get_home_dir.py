import os
from pathlib import Path

from ...constants import POSTMORE_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Resolve $POSTMORE_HOME (or ~/.postmore), optionally joined with parts."""
    env_home = os.environ.get("POSTMORE_HOME")
    home = Path(env_home).expanduser().resolve() if env_home else Path.home() / POSTMORE_HOME_EXT
    return home.joinpath(*parts)
