import copy

import pytest

from pullsbot.commands import CommandContext
from pullsbot.store import MongoBrain


class FakeCollection:
    """In-memory stand-in for the handful of pymongo calls MongoBrain makes."""

    def __init__(self):
        self.docs: list[dict] = []

    def _find(self, query):
        for doc in self.docs:
            if all(doc.get(k) == v for k, v in query.items()):
                return doc
        return None

    def find_one(self, query):
        doc = self._find(query)
        return copy.deepcopy(doc) if doc else None

    def find(self, query=None, projection=None):
        query = query or {}
        for doc in self.docs:
            if all(doc.get(k) == v for k, v in query.items()):
                if projection:
                    yield {k: doc[k] for k in projection if k in doc}
                else:
                    yield copy.deepcopy(doc)

    def update_one(self, query, update, upsert=False):
        doc = self._find(query)
        if doc is None:
            if not upsert:
                return
            doc = dict(query)
            self.docs.append(doc)
        doc.update(copy.deepcopy(update.get("$set", {})))

    def delete_one(self, query):
        doc = self._find(query)
        if doc is not None:
            self.docs.remove(doc)


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def brain(collection):
    return MongoBrain(collection)


@pytest.fixture
def issues():
    return []


@pytest.fixture
def ctx(brain, issues):
    return CommandContext(
        user_id="U123",
        trigger="pulls",
        text="pulls",
        brain=brain,
        fetch_issues=lambda: issues,
    )


def make_issue(
    repo="core",
    title="Fix things",
    body="",
    author="alice",
    assignee=None,
    pull_request=True,
    number=1,
):
    issue = {
        "repository_url": f"https://api.github.com/repos/acme/{repo}",
        "repository": {"name": repo},
        "title": title,
        "body": body,
        "html_url": f"https://github.com/acme/{repo}/pull/{number}",
        "user": {"login": author},
        "assignee": {"login": assignee} if assignee else None,
    }
    if pull_request:
        issue["pull_request"] = {"url": f"https://api.github.com/repos/acme/{repo}/pulls/{number}"}
    return issue
