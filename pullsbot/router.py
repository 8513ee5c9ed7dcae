"""
Ordered command dispatch: the first pattern matching the command text wins.
"""
import re

from pullsbot import commands
from pullsbot.commands import CommandContext
from pullsbot.errors import UnknownCommand
from pullsbot.logger import logger
from pullsbot.utils import render_error


def _rule(pattern: str, handler):
    return re.compile(pattern, re.IGNORECASE), handler


# More specific patterns must precede the catch-all team name rule at the end
ACTIONS = [
    _rule(r"^$", commands.list_prs_for_user),
    _rule(r"^ help$", commands.get_help),
    _rule(r"^ list$", commands.list_teams),
    _rule(r"^ add team (.*)$", commands.new_team),
    _rule(r"^ new team (.*)$", commands.new_team),
    _rule(r"^ username (.*)$", commands.new_team_for_user),
    _rule(r"^ delete team (.*)$", commands.remove_team),
    _rule(r"^ remove team (.*)$", commands.remove_team),
    _rule(r"^ rename team (.*) to (.*)$", commands.rename_team),
    _rule(r"^ details (.*)$", commands.team_details),
    _rule(r"^ details$", commands.team_details_for_user),
    _rule(r"^ add snippet (.*) to (.*)$", commands.add_snippet),
    _rule(r"^ add snippet (.*)$", commands.add_snippet_for_user),
    _rule(r"^ new snippet (.*) to (.*)$", commands.add_snippet),
    _rule(r"^ new snippet (.*)$", commands.add_snippet_for_user),
    _rule(r"^ delete snippet (.*) from (.*)$", commands.remove_snippet),
    _rule(r"^ delete snippet (.*)$", commands.remove_snippet_for_user),
    _rule(r"^ remove snippet (.*) from (.*)$", commands.remove_snippet),
    _rule(r"^ remove snippet (.*)$", commands.remove_snippet_for_user),
    _rule(r"^ (.*)$", commands.list_prs),
]


def dispatch(command: str, ctx: CommandContext) -> list[str]:
    """
    Run the handler of the first rule matching ``command`` and return the
    replies to send, in order. Always returns at least one reply.
    """
    try:
        for pattern, handler in ACTIONS:
            m = pattern.match(command)
            if m:
                logger.debug("Command %r handled by %s", command, handler.__name__)
                result = handler(ctx, *m.groups())
                return [result] if isinstance(result, str) else list(result)
        raise UnknownCommand(ctx.text)
    except Exception as e:
        return [render_error(e, ctx.trigger)]
