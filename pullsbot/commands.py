"""
Chat command handlers.

Every handler takes a CommandContext followed by the groups captured from the
command pattern and returns the reply text. Errors are raised as PullsBotError
subclasses and rendered by the router.
"""
from dataclasses import dataclass
from typing import Callable

from pullsbot import teams
from pullsbot.errors import FetchError
from pullsbot.logger import logger
from pullsbot.report import build_report
from pullsbot.store import MongoBrain
from pullsbot.utils import render_error, sanitize_snippet, sanitize_team_name


@dataclass
class CommandContext:
    user_id: str
    trigger: str
    text: str
    brain: MongoBrain
    fetch_issues: Callable[[], list[dict]]


def _bullets(items: list[str]) -> str:
    return "\n".join(f" - {item}" for item in items)


def provide_username(ctx: CommandContext) -> str:
    return f"Please provide your username: `{ctx.trigger} username <github username>`"


def get_help(ctx: CommandContext) -> str:
    logger.debug("Help")
    t = ctx.trigger
    return f"""*Available commands:*

`{t}` - list PRs and issues matching your own snippets
`{t} <team>` - list PRs and issues matching a team's snippets
`{t} username <github username>` - register your GitHub username
`{t} details` - show your snippets
`{t} add snippet <snippet>` - add a snippet to your profile
`{t} remove snippet <snippet>` - remove a snippet from your profile

`{t} list` - list configured teams
`{t} new team <team>` - create a team
`{t} rename team <old> to <new>` - rename a team
`{t} remove team <team>` - delete a team
`{t} details <team>` - show a team's snippets
`{t} add snippet <snippet> to <team>` - add a snippet to a team
`{t} remove snippet <snippet> from <team>` - remove a snippet from a team
"""


def list_prs(ctx: CommandContext, team: str) -> str:
    team = sanitize_team_name(team)
    snippets = teams.get_snippets(ctx.brain, team)
    logger.debug("Listing PRs for key=%s with %s snippet(s)", team, len(snippets))
    try:
        issues = ctx.fetch_issues()
    except FetchError as e:
        # The fetch failure is the reply itself
        return str(e)
    return build_report(issues, snippets)


def list_prs_for_user(ctx: CommandContext) -> str:
    if not teams.team_exists(ctx.brain, ctx.user_id):
        return provide_username(ctx)
    return list_prs(ctx, ctx.user_id)


def list_teams(ctx: CommandContext) -> str:
    return f"Configured teams:\n{_bullets(teams.list_teams(ctx.brain))}"


def new_team(ctx: CommandContext, team: str) -> str:
    team = sanitize_team_name(team)
    teams.create_team(ctx.brain, team)
    return f"Created team: {team}!"


def new_team_for_user(ctx: CommandContext, username: str) -> list[str]:
    username = sanitize_snippet(username)
    teams.ensure_snippet(ctx.brain, ctx.user_id, username)
    logger.info("Registered GitHub username %s for user=%s", username, ctx.user_id)
    registered = (
        f"Github username registered: `{username}`! "
        f"From now on, just type '{ctx.trigger}' to see your issues."
    )
    # Acknowledge the stored username even when the report fails
    try:
        report = list_prs_for_user(ctx)
    except Exception as e:
        report = render_error(e, ctx.trigger)
    return [registered, report]


def remove_team(ctx: CommandContext, team: str) -> str:
    team = sanitize_team_name(team)
    teams.remove_team(ctx.brain, team)
    return f"Removed team: {team}!"


def rename_team(ctx: CommandContext, old_team: str, new_team: str) -> str:
    old_team = sanitize_team_name(old_team)
    new_team = sanitize_team_name(new_team, "New team name")
    teams.rename_team(ctx.brain, old_team, new_team)
    return f"Renamed team {old_team} to {new_team}!"


def team_details(ctx: CommandContext, team: str) -> str:
    team = sanitize_team_name(team)
    snippets = teams.get_snippets(ctx.brain, team)
    return f"Details for {team}:\n{_bullets(snippets)}"


def team_details_for_user(ctx: CommandContext) -> str:
    if not teams.team_exists(ctx.brain, ctx.user_id):
        return provide_username(ctx)
    return f"Details:\n{_bullets(teams.get_snippets(ctx.brain, ctx.user_id))}"


def add_snippet(ctx: CommandContext, snippet: str, team: str) -> str:
    snippet = sanitize_snippet(snippet)
    team = sanitize_team_name(team)
    teams.add_snippet(ctx.brain, team, snippet)
    return f"Added {snippet} to {team}!"


def add_snippet_for_user(ctx: CommandContext, snippet: str) -> str:
    if not teams.team_exists(ctx.brain, ctx.user_id):
        return provide_username(ctx)
    snippet = sanitize_snippet(snippet)
    teams.add_snippet(ctx.brain, ctx.user_id, snippet)
    return f"Added {snippet}!"


def remove_snippet(ctx: CommandContext, snippet: str, team: str) -> str:
    snippet = sanitize_snippet(snippet)
    team = sanitize_team_name(team)
    teams.remove_snippet(ctx.brain, team, snippet)
    return f"Removed {snippet} from {team}!"


def remove_snippet_for_user(ctx: CommandContext, snippet: str) -> str:
    if not teams.team_exists(ctx.brain, ctx.user_id):
        return provide_username(ctx)
    snippet = sanitize_snippet(snippet)
    teams.remove_snippet(ctx.brain, ctx.user_id, snippet)
    return f"Removed {snippet}!"
