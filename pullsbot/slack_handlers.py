"""
Glue between a Slack mention and the command router.
"""
from typing import Callable

from pullsbot.commands import CommandContext
from pullsbot.logger import logger
from pullsbot.router import dispatch
from pullsbot.store import MongoBrain
from pullsbot.utils import parse_trigger, strip_leading_mention


def handle_mention_text(
    raw_text: str,
    user_id: str,
    brain: MongoBrain,
    fetch_issues: Callable[[], list[dict]],
    say: Callable[[str], object],
) -> None:
    # Strip leading '<@BOTID>' mention so commands work on the real text.
    clean_text = strip_leading_mention(raw_text)

    parsed = parse_trigger(clean_text)
    if parsed is None:
        logger.debug(f"Ignoring mention without trigger word: {clean_text}")
        return

    trigger, command = parsed
    ctx = CommandContext(
        user_id=user_id,
        trigger=trigger,
        text=clean_text,
        brain=brain,
        fetch_issues=fetch_issues,
    )
    for reply in dispatch(command, ctx):
        say(reply)
