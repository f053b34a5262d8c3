"""agent-browser CLI front-end: global flag parsing and session name validation.

Example:
    ```python
    from agent_browser_cli import clean_args, parse_flags

    argv = ["--json", "--session-name", "my-project", "open", "example.com"]
    parsed = parse_flags(argv)
    if parsed.errors:
        ...
    command = clean_args(argv)  # ["open", "example.com"]
    ```
"""

__version__ = "0.1.0"

# Configuration
from .config import EnvDefaults

# Errors
from .errors import (
    AgentBrowserError,
    FlagValidationError,
    InvalidSessionIdError,
    InvalidSessionNameError,
)

# Flag parsing
from .flags import Flags, ParsedFlags, clean_args, parse_flags, split_args

# Session state paths
from .sessions import auto_state_file_path, get_sessions_dir, state_file_for

# Validation
from .validation import is_valid_session_id, is_valid_session_name, session_name_error

__all__ = [
    # Version
    "__version__",
    # Config
    "EnvDefaults",
    # Errors
    "AgentBrowserError",
    "FlagValidationError",
    "InvalidSessionIdError",
    "InvalidSessionNameError",
    # Flags
    "Flags",
    "ParsedFlags",
    "parse_flags",
    "clean_args",
    "split_args",
    # Sessions
    "get_sessions_dir",
    "auto_state_file_path",
    "state_file_for",
    # Validation
    "is_valid_session_name",
    "is_valid_session_id",
    "session_name_error",
]
