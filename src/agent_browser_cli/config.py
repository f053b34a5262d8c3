"""Environment-derived defaults for global flags."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

# Environment variables consulted before argument parsing
SESSION_ENV = "AGENT_BROWSER_SESSION"
EXECUTABLE_PATH_ENV = "AGENT_BROWSER_EXECUTABLE_PATH"
SESSION_NAME_ENV = "AGENT_BROWSER_SESSION_NAME"

DEFAULT_SESSION = "default"


@dataclass
class EnvDefaults:
    """Defaults for global flags, as found in the environment.

    Attributes:
        session: Session ID, ``"default"`` unless AGENT_BROWSER_SESSION is set
        executable_path: Browser executable from AGENT_BROWSER_EXECUTABLE_PATH
        session_name: Raw AGENT_BROWSER_SESSION_NAME value, not yet validated
    """

    session: str = DEFAULT_SESSION
    executable_path: str | None = None
    session_name: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "EnvDefaults":
        """Read defaults from ``environ`` (``os.environ`` when omitted).

        A variable set to the empty string still counts as present.
        """
        if environ is None:
            environ = os.environ

        return cls(
            session=environ.get(SESSION_ENV, DEFAULT_SESSION),
            executable_path=environ.get(EXECUTABLE_PATH_ENV),
            session_name=environ.get(SESSION_NAME_ENV),
        )
