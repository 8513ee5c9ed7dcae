"""
Configuration and environment variable validation.
"""
import os
import sys
from dataclasses import dataclass

from pullsbot.constants import DEFAULT_GITHUB_API_URL
from pullsbot.logger import logger


REQUIRED_VARS = {
    "SLACK_BOT_TOKEN": "Slack bot token for authentication",
    "SLACK_SIGNING_SECRET": "Slack signing secret for request verification",
    "MONGO_URL": "MongoDB connection URL",
    "GITHUB_TOKEN": "GitHub token used to read the organization's issues",
    "GITHUB_ORG": "GitHub organization whose issues are reported",
}

OPTIONAL_VARS = {
    "GITHUB_API_URL": f"GitHub API base URL (defaults to {DEFAULT_GITHUB_API_URL})",
    "PORT": "Server port (defaults to 3000 if not set)",
    "ENV": "Environment (prod/dev, defaults to dev if not set)",
    "LOG_LEVEL": "Logging level (defaults to DEBUG)",
}


@dataclass(frozen=True)
class GithubSettings:
    api_url: str
    org: str
    token: str


def validate_environment_variables() -> None:
    """
    Validate all required environment variables at startup.
    Exits the application with a clear error message if any are missing.
    """
    missing_vars = []

    for var_name, description in REQUIRED_VARS.items():
        value = os.getenv(var_name)
        if not value or not value.strip():
            missing_vars.append(f"  - {var_name}: {description}")
            logger.error(f"Missing required environment variable: {var_name}")

    if missing_vars:
        error_message = (
            "Missing required environment variables:\n"
            + "\n".join(missing_vars)
            + "\n\nPlease set these variables before starting the application."
        )
        logger.critical(error_message)
        print(error_message, file=sys.stderr)
        sys.exit(1)

    # Log optional variables status
    for var_name, description in OPTIONAL_VARS.items():
        value = os.getenv(var_name)
        if not value or not value.strip():
            logger.info(f"Optional environment variable not set: {var_name} - {description}")
        else:
            logger.debug(f"Environment variable set: {var_name}")

    logger.info("Environment variable validation completed successfully")


def load_github_settings() -> GithubSettings:
    return GithubSettings(
        api_url=(os.getenv("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL).rstrip("/"),
        org=(os.getenv("GITHUB_ORG") or "").strip(),
        token=(os.getenv("GITHUB_TOKEN") or "").strip(),
    )
