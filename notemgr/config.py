# notemgr/config.py

import os
import sys
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

# Load environment variables from the .env file into the system environment
load_dotenv()

# Environment variable that overrides where the session snapshot is written
AUTOSAVE_PATH_ENV = "NOTEMGR_AUTOSAVE_PATH"

# Environment variable that turns on progress messages (logging_utils.log_verbose)
VERBOSE_ENV = "NOTEMGR_VERBOSE"

# Used when the running program has no usable name (e.g. `python -c`)
DEFAULT_PROGRAM_NAME = "notemgr"


def default_autosave_path(argv0: Optional[str] = None) -> Path:
    """
    Return `<program base name>.json` in the current working directory.

    The snapshot is named after the running executable, so two differently
    named launchers keep separate sessions side by side.
    """
    name = Path(argv0 if argv0 is not None else sys.argv[0]).stem
    # `python -m notemgr` runs notemgr/__main__.py
    if not name or name == "__main__":
        name = DEFAULT_PROGRAM_NAME
    return Path(f"{name}.json")


def resolve_autosave_path(explicit: Optional[Union[str, Path]] = None) -> Path:
    """
    Pick the auto-save path: CLI value, then environment, then program name.
    """
    if explicit:
        return Path(explicit)

    from_env = os.getenv(AUTOSAVE_PATH_ENV)
    if from_env:
        return Path(from_env)

    return default_autosave_path()


def verbose_from_env() -> bool:
    """Return True when NOTEMGR_VERBOSE is set to 1 / true / yes."""
    return os.getenv(VERBOSE_ENV, "").strip().lower() in {"1", "true", "yes"}
