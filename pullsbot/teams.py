"""
Team operations over the key-value store.

A key exists when its stored value is a list; anything else counts as absent.
"""
from pullsbot.errors import TeamAlreadyExists, TeamNotFound
from pullsbot.logger import logger
from pullsbot.store import MongoBrain


def _unique(snippets: list[str], *extra: str) -> list[str]:
    result: list[str] = []
    for snippet in [*snippets, *extra]:
        if snippet not in result:
            result.append(snippet)
    return result


def team_exists(brain: MongoBrain, name: str) -> bool:
    return isinstance(brain.get(name), list)


def list_teams(brain: MongoBrain) -> list[str]:
    return brain.keys()


def get_snippets(brain: MongoBrain, name: str) -> list[str]:
    snippets = brain.get(name)
    if not isinstance(snippets, list):
        raise TeamNotFound(name)
    return snippets


def create_team(brain: MongoBrain, name: str) -> None:
    if team_exists(brain, name):
        raise TeamAlreadyExists(name)
    brain.set(name, [])
    logger.info("Created team %s", name)


def remove_team(brain: MongoBrain, name: str) -> None:
    # Deleting a missing team is not an error
    brain.delete(name)
    logger.info("Removed team %s", name)


def rename_team(brain: MongoBrain, old: str, new: str) -> None:
    snippets = get_snippets(brain, old)
    if team_exists(brain, new):
        raise TeamAlreadyExists(new)
    brain.set(new, snippets)
    brain.delete(old)
    logger.info("Renamed team %s to %s", old, new)


def add_snippet(brain: MongoBrain, name: str, snippet: str) -> list[str]:
    snippets = _unique(get_snippets(brain, name), snippet)
    brain.set(name, snippets)
    return snippets


def remove_snippet(brain: MongoBrain, name: str, snippet: str) -> list[str]:
    snippets = [s for s in get_snippets(brain, name) if s != snippet]
    brain.set(name, snippets)
    return snippets


def ensure_snippet(brain: MongoBrain, name: str, snippet: str) -> list[str]:
    """Add ``snippet`` to ``name``, creating the entry first if needed."""
    current = brain.get(name)
    snippets = _unique(current if isinstance(current, list) else [], snippet)
    brain.set(name, snippets)
    return snippets
