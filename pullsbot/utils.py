import re

from pullsbot.constants import MAX_SNIPPET_LENGTH, MAX_TEAM_NAME_LENGTH
from pullsbot.errors import InvalidName, PullsBotError

TRIGGER_RE = re.compile(r"^(pulls|prs)(.*)", re.IGNORECASE)


def strip_leading_mention(text: str) -> str:
    """
    Remove a leading Slack user mention like '<@U123ABC>' plus any following whitespace.
    """
    return re.sub(r"^<@[^>]+>\s*", "", text or "").strip()


def parse_trigger(text: str) -> tuple[str, str] | None:
    """
    Split a message into its trigger word and the command text after it.

    The command text keeps its leading space, so ``"pulls list"`` gives
    ``("pulls", " list")`` and ``"pulls"`` gives ``("pulls", "")``.
    Returns None when the message is not addressed to this bot's commands.
    """
    m = TRIGGER_RE.match(text or "")
    if not m:
        return None
    return m.group(1), m.group(2)


def sanitize_team_name(name: str | None, label: str = "Team name") -> str:
    """
    Strip and validate a team name before it is used as a store key.

    Raises:
        InvalidName: if the name is empty, too long or looks like a MongoDB operator
    """
    if name is None or not name.strip():
        raise InvalidName(f"{label} cannot be empty.")

    name = name.strip()

    if len(name) > MAX_TEAM_NAME_LENGTH:
        raise InvalidName(f"{label} is too long (max {MAX_TEAM_NAME_LENGTH} characters).")

    # Keys starting with $ are MongoDB operators
    if name.startswith("$"):
        raise InvalidName(f"{label} cannot start with `$`.")

    return name


def sanitize_snippet(snippet: str | None) -> str:
    if snippet is None or not snippet.strip():
        raise InvalidName("Snippet cannot be empty.")

    snippet = snippet.strip()
    if len(snippet) > MAX_SNIPPET_LENGTH:
        raise InvalidName(f"Snippet is too long (max {MAX_SNIPPET_LENGTH} characters).")
    return snippet


def get_mongodb_error_message(error: Exception, operation_name: str = "operation") -> str:
    """
    Convert MongoDB errors to user-friendly messages.

    Args:
        error: The exception that occurred
        operation_name: Name of the operation for logging context

    Returns:
        User-friendly error message string
    """
    from pymongo.errors import (
        ConnectionFailure,
        ServerSelectionTimeoutError,
        OperationFailure,
    )
    from pullsbot.logger import logger

    logger.exception("MongoDB error in %s: %s", operation_name, str(error))

    if isinstance(error, (ConnectionFailure, ServerSelectionTimeoutError)):
        return (
            "I'm having trouble connecting to the database. "
            "Please try again in a moment."
        )
    elif isinstance(error, OperationFailure):
        return (
            "A database operation failed. "
            "Please try again or contact support if the issue persists."
        )
    return "A database error occurred. Please try again in a moment."


def render_error(error: Exception, trigger: str = "pulls") -> str:
    """
    Turn an exception raised while handling a command into its chat reply.
    """
    from pymongo.errors import PyMongoError
    from pullsbot.logger import logger

    if isinstance(error, PullsBotError):
        logger.info("Command failed: %s", error)
        return error.reply(trigger)
    if isinstance(error, PyMongoError):
        return get_mongodb_error_message(error, "command")
    logger.error("Unhandled error while handling command: %s", error, exc_info=error)
    return f"Unhandled error:\n{error}"


def is_slack_retry(headers) -> bool:
    """
    Slack redelivers an event when it was not acknowledged within 3 seconds;
    redeliveries carry an ``X-Slack-Retry-Num`` header.
    """
    return bool(headers.get("x-slack-retry-num"))
