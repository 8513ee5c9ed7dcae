"""
Errors raised by command handlers and their collaborators.

Each one knows the chat reply it turns into.
"""


class PullsBotError(Exception):
    """Base class for errors that are replied to the user."""

    def reply(self, trigger: str = "pulls") -> str:
        return str(self)


class UnknownCommand(PullsBotError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Error: Unknown command `{text}`")


class TeamNotFound(PullsBotError):
    def __init__(self, team: str):
        self.team = team
        super().__init__(f"Team does not exist: {team}")

    def reply(self, trigger: str = "pulls") -> str:
        return f"Error: Team does not exist. See `{trigger} new team {self.team}`."


class TeamAlreadyExists(PullsBotError):
    def __init__(self, team: str):
        self.team = team
        super().__init__(f"Team already exists: {team}")

    def reply(self, trigger: str = "pulls") -> str:
        return f"Error: Team already exists. See `{trigger} details {self.team}`."


class InvalidName(PullsBotError):
    def reply(self, trigger: str = "pulls") -> str:
        return f"Error: {self}"


class FetchError(PullsBotError):
    """GitHub returned something other than a list of issues, or the request failed."""

    def __init__(self, message: str, body: str | None = None):
        self.body = body
        super().__init__(message)
