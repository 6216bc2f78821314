"""Configuration management for tilemath.

Settings are loaded with Dynaconf from multiple locations in order of
increasing priority:

1. Global settings (/etc/tilemath/)
2. User settings (~/.config/tilemath/)
3. Current directory settings (./)
4. Environment variable specified file (TILEMATH_SETTINGS_FILE_FOR_DYNACONF)

Attributes
----------
USER_DIR : pathlib.Path
    Path to user configuration directory.
GLOB_DIR : pathlib.Path
    Path to global configuration directory.
CURR_DIR : pathlib.Path
    Path to current working directory.
settings : Dynaconf
    The Dynaconf settings object with loaded configuration.
"""
import logging
import os
import pathlib

from dynaconf import Dynaconf

logger = logging.getLogger(__name__)

USER_DIR = pathlib.Path("~/.config/tilemath").expanduser()
GLOB_DIR = pathlib.Path("/etc/tilemath/")
CURR_DIR = pathlib.Path("./").absolute()
settings_files = [
    GLOB_DIR / "settings.toml",
    GLOB_DIR / ".secrets.toml",
    USER_DIR / "settings.toml",
    USER_DIR / ".secrets.toml",
    CURR_DIR / "settings.toml",
    CURR_DIR / ".secrets.toml"
    ]
extra_file = os.getenv("TILEMATH_SETTINGS_FILE_FOR_DYNACONF")
if extra_file:
    settings_files.append(pathlib.Path(extra_file).absolute())

DEFAULT_ZOOM = 12

settings = Dynaconf(
    merge_enabled = True,
    envvar_prefix="TILEMATH",
    settings_files=settings_files,
    environments=True,
    load_dotenv=True,
)


def default_zoom():
    """Return the zoom level used when a caller does not give one."""
    return int(settings.get("default_zoom", DEFAULT_ZOOM))


def check_preconditions():
    """Return whether debug precondition checks should run."""
    return bool(settings.get("check_preconditions", True))


def change_env(new_env):
    """Change the active Dynaconf environment.

    Parameters
    ----------
    new_env : str
        The environment name to switch to (e.g., 'development', 'production').
    """
    logger.debug("Switching settings environment to %s", new_env)
    settings.setenv(new_env)
    settings.reload()
