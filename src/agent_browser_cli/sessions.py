"""Paths of auto-saved session state files.

Only computes paths; creating the directory and reading or writing state is
left to the session persistence layer.
"""

from pathlib import Path

from .errors import InvalidSessionIdError, InvalidSessionNameError
from .flags import Flags
from .validation import is_valid_session_id, is_valid_session_name

SESSIONS_SUBDIR = Path(".agent-browser") / "sessions"


def get_sessions_dir(home: str | Path | None = None) -> Path:
    """Return the session persistence directory, ``~/.agent-browser/sessions``."""
    base = Path(home) if home is not None else Path.home()
    return base / SESSIONS_SUBDIR


def auto_state_file_path(
    session_name: str | None,
    session_id: str,
    sessions_dir: str | Path | None = None,
) -> Path | None:
    """Get the auto-save state file for a session.

    Files are named ``{session_name}-{session_id}.json``.

    Args:
        session_name: Persistence name (e.g. "twitter"); None or empty disables auto-save
        session_id: Session ID (e.g. "default" or "agent1")
        sessions_dir: Directory to place the file in (default: get_sessions_dir())

    Returns:
        Path to the state file, or None if no session name is set

    Raises:
        InvalidSessionNameError: If session_name contains disallowed characters
        InvalidSessionIdError: If session_id contains disallowed characters
    """
    if not session_name:
        return None
    if not is_valid_session_name(session_name):
        raise InvalidSessionNameError(session_name)
    if not is_valid_session_id(session_id):
        raise InvalidSessionIdError(session_id)

    directory = Path(sessions_dir) if sessions_dir is not None else get_sessions_dir()
    return directory / f"{session_name}-{session_id}.json"


def state_file_for(flags: Flags, sessions_dir: str | Path | None = None) -> Path | None:
    """Get the auto-save state file selected by parsed global flags."""
    return auto_state_file_path(flags.session_name, flags.session, sessions_dir)
