"""Exception hierarchy for agent-browser CLI errors."""

from .validation import env_session_name_error, session_id_error, session_name_error


class AgentBrowserError(Exception):
    """Base exception for all agent-browser CLI errors."""

    pass


class InvalidSessionNameError(AgentBrowserError, ValueError):
    """Raised when a session name contains characters outside the allow-list."""

    def __init__(self, name: str, source: str = "flag"):
        self.name = name
        self.source = source
        if source == "env":
            message = env_session_name_error(name)
        else:
            message = session_name_error(name)
        super().__init__(message)


class InvalidSessionIdError(AgentBrowserError, ValueError):
    """Raised when a session ID cannot be used in a file name."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(session_id_error(session_id))


class FlagValidationError(AgentBrowserError):
    """Raised when parsed global flags carry validation errors."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))
