"""Global flag parsing for the agent-browser command line.

Global flags apply to every subcommand. ``parse_flags`` extracts them from the
argument vector and ``clean_args`` strips them, leaving the subcommand and its
own arguments for the command dispatcher.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Optional, Sequence

from .config import DEFAULT_SESSION, EnvDefaults
from .errors import FlagValidationError
from .validation import env_session_name_error, is_valid_session_name, session_name_error

logger = logging.getLogger(__name__)

# Standalone switches, mapped to the Flags attribute they set
BOOLEAN_FLAGS = {
    "--json": "json",
    "--full": "full",
    "-f": "full",
    "--headed": "headed",
    "--debug": "debug",
}

# Flags that consume the following argument as their value
VALUE_FLAGS = {
    "--session": "session",
    "--headers": "headers",
    "--executable-path": "executable_path",
    "--cdp": "cdp",
    "--session-name": "session_name",
}

GLOBAL_FLAGS = frozenset(BOOLEAN_FLAGS) | frozenset(VALUE_FLAGS)


@dataclass
class Flags:
    """Parsed global flags.

    Attributes:
        json: Emit machine-readable output
        full: Full output (``--full`` or ``-f``)
        headed: Show the browser window
        debug: Verbose diagnostics
        session: Session ID used to select the browser daemon
        headers: Extra HTTP headers as a JSON string
        executable_path: Custom browser executable
        cdp: Chrome DevTools Protocol endpoint to connect to
        session_name: Name for auto-saved cookies and storage; always valid
    """

    json: bool = False
    full: bool = False
    headed: bool = False
    debug: bool = False
    session: str = DEFAULT_SESSION
    headers: Optional[str] = None
    executable_path: Optional[str] = None
    cdp: Optional[str] = None
    session_name: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the flags as a plain dict keyed by field name."""
        return asdict(self)


@dataclass
class ParsedFlags:
    """Result of flag parsing: the flags plus any validation errors."""

    flags: Flags
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise FlagValidationError if any validation error was recorded."""
        if self.errors:
            raise FlagValidationError(self.errors)


def parse_flags(args: Sequence[str], defaults: EnvDefaults | None = None) -> ParsedFlags:
    """Extract global flags from an argument list.

    Parsing never fails: unknown tokens are left for the subcommand parser, a
    value flag without a following value is ignored, and an invalid session
    name is reported in ``errors`` without touching ``session_name``.

    Args:
        args: Arguments after the program name
        defaults: Environment defaults; read from ``os.environ`` when omitted

    Returns:
        ParsedFlags with the flags and errors in discovery order
    """
    if defaults is None:
        defaults = EnvDefaults.from_environ()

    errors: list[str] = []

    session_name = None
    if defaults.session_name is not None:
        if is_valid_session_name(defaults.session_name):
            session_name = defaults.session_name
        else:
            errors.append(env_session_name_error(defaults.session_name))

    flags = Flags(
        session=defaults.session,
        executable_path=defaults.executable_path,
        session_name=session_name,
    )

    i = 0
    while i < len(args):
        arg = args[i]

        if arg in BOOLEAN_FLAGS:
            setattr(flags, BOOLEAN_FLAGS[arg], True)
        elif arg in VALUE_FLAGS and i + 1 < len(args):
            value = args[i + 1]
            attr = VALUE_FLAGS[arg]
            if attr == "session_name" and not is_valid_session_name(value):
                # The value is still consumed so later flags stay aligned
                errors.append(session_name_error(value))
            else:
                setattr(flags, attr, value)
            i += 1
        elif arg in VALUE_FLAGS:
            logger.debug(f"Ignoring {arg}: no value follows")

        i += 1

    if errors:
        logger.debug(f"Flag parsing finished with {len(errors)} error(s)")

    return ParsedFlags(flags=flags, errors=errors)


def clean_args(args: Sequence[str]) -> list[str]:
    """Remove known global flags, and the values of value flags, from ``args``.

    Unknown flags are kept so subcommand-specific options pass through.
    Values are not validated.
    """
    result: list[str] = []
    skip_next = False

    for arg in args:
        if skip_next:
            skip_next = False
            continue
        if arg in VALUE_FLAGS:
            skip_next = True
            continue
        if arg in BOOLEAN_FLAGS:
            continue
        result.append(arg)

    return result


def split_args(
    args: Sequence[str], defaults: EnvDefaults | None = None
) -> tuple[ParsedFlags, list[str]]:
    """Parse global flags and return them with the remaining command arguments."""
    return parse_flags(args, defaults), clean_args(args)
