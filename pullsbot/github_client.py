"""
Fetch the organization's open issues and pull requests from the GitHub REST API.
"""
import requests

from pullsbot.config import GithubSettings
from pullsbot.constants import GITHUB_API_TIMEOUT_SECONDS, GITHUB_USER_AGENT
from pullsbot.errors import FetchError
from pullsbot.logger import logger


def _fetch_error(body: str) -> FetchError:
    return FetchError(f"Error from fetching issues:\n```\n{body}\n```", body=body)


def fetch_org_issues(settings: GithubSettings) -> list[dict]:
    """
    Return every issue/PR visible to the token in ``settings.org``.

    A single request, no pagination and no retries.

    Raises:
        FetchError: on transport failure or when the response is not a JSON list
    """
    url = f"{settings.api_url}/orgs/{settings.org}/issues"
    logger.debug("Fetching issues from %s", url)

    try:
        response = requests.get(
            url,
            params={"filter": "all"},
            headers={
                "Authorization": f"token {settings.token}",
                "Accept": "application/vnd.github+json",
                "User-Agent": GITHUB_USER_AGENT,
            },
            timeout=GITHUB_API_TIMEOUT_SECONDS,
        )
    except requests.RequestException as e:
        logger.error("GitHub request failed for org=%s: %s", settings.org, e)
        raise FetchError(f"Error from fetching issues: {e}") from e

    body = response.text
    try:
        issues = response.json()
    except ValueError:
        logger.error("GitHub returned non-JSON body (status=%s)", response.status_code)
        raise _fetch_error(body)

    if not isinstance(issues, list):
        logger.error("GitHub returned unexpected payload (status=%s)", response.status_code)
        raise _fetch_error(body)

    logger.debug("Fetched %s issue(s) for org=%s", len(issues), settings.org)
    return issues
