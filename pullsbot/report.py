"""
Turn fetched GitHub issues into a per-repository Slack report.
"""
from itertools import groupby

from pullsbot.constants import NO_PRS_MESSAGE


def group_by_repository_url(issues: list[dict]) -> list[list[dict]]:
    """Stable-sort issues by ``repository_url`` and group them, groups in ascending key order."""
    ordered = sorted(issues, key=lambda issue: issue.get("repository_url") or "")
    return [
        list(group)
        for _, group in groupby(ordered, key=lambda issue: issue.get("repository_url") or "")
    ]


def _login(issue: dict, field: str) -> str | None:
    user = issue.get(field)
    if isinstance(user, dict):
        return user.get("login")
    return None


def matches(issue: dict, snippet: str) -> bool:
    """
    Substring match on title or body, or exact match of the assignee/author
    login against the snippet with spaces and ``@`` stripped.
    """
    title = issue.get("title") or ""
    body = issue.get("body") or ""
    if snippet in title or snippet in body:
        return True

    login = snippet.strip(" @")
    return login in (_login(issue, "assignee"), _login(issue, "user"))


def issue_to_link(issue: dict) -> str:
    link = f"<{issue.get('html_url') or ''}|{issue.get('title') or ''}>"
    kind = "PR" if isinstance(issue.get("pull_request"), dict) else "issue"
    extras = [f"{kind} -> {_login(issue, 'user')}"]
    assignee = _login(issue, "assignee")
    if assignee:
        extras.append(f"assigned to {assignee}")
    return f"{link} ({', '.join(extras)})"


def issues_to_links(issues: list[dict], snippets: list[str]) -> list[str]:
    return [
        issue_to_link(issue)
        for issue in issues
        if any(matches(issue, snippet) for snippet in snippets)
    ]


def build_report(issues: list[dict], snippets: list[str]) -> str:
    blocks = []
    for group in group_by_repository_url(issues):
        links = issues_to_links(group, snippets)
        if not links:
            continue
        repository = group[0].get("repository") or {}
        lines = "\n".join(f" - {link}" for link in links)
        blocks.append(f"*{repository.get('name')}*\n{lines}")

    message = "\n".join(blocks)
    return message or NO_PRS_MESSAGE
