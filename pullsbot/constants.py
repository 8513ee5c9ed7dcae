"""
Tunables shared across the bot.
"""

MONGODB_SERVER_SELECTION_TIMEOUT_MS = 5000
MONGODB_DATABASE = "pullsbot"
MONGODB_TEAMS_COLLECTION = "teams"

DEFAULT_GITHUB_API_URL = "https://api.github.com"
GITHUB_API_TIMEOUT_SECONDS = 30
GITHUB_USER_AGENT = "pullsbot/1.0"

MAX_TEAM_NAME_LENGTH = 128
MAX_SNIPPET_LENGTH = 256

# Reply used when no issue matches any snippet of the team
NO_PRS_MESSAGE = "no PRs!! you're in the clear"
