"""Validation of user-supplied identifiers that end up in file paths.

Session names and session IDs are interpolated into the file names used for
cookie and storage persistence, so they are restricted to ASCII letters,
digits, hyphens and underscores. Anything else, including dots, slashes,
whitespace and non-ASCII characters, is rejected.
"""

_ALLOWED = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_")

_ALLOWED_HINT = "Only alphanumeric characters, hyphens, and underscores are allowed."


def is_valid_session_name(name: str) -> bool:
    """Check that a session name is safe for use in file paths.

    Args:
        name: Candidate session name, checked verbatim (no trimming or case folding)

    Returns:
        True if the name is non-empty and made only of ``[A-Za-z0-9_-]``
    """
    if not name:
        return False

    for ch in name:
        if ch not in _ALLOWED:
            return False

    return True


def is_valid_session_id(session_id: str) -> bool:
    """Check a session ID with the same allow-list as session names."""
    return is_valid_session_name(session_id)


def session_name_error(name: str) -> str:
    """Return the error message for a rejected session name."""
    return f"Invalid session name '{name}'. {_ALLOWED_HINT}"


def env_session_name_error(name: str) -> str:
    """Return the error message for a rejected AGENT_BROWSER_SESSION_NAME value."""
    return f"Invalid AGENT_BROWSER_SESSION_NAME '{name}'. {_ALLOWED_HINT}"


def session_id_error(session_id: str) -> str:
    return f"Invalid session ID '{session_id}'. {_ALLOWED_HINT}"
