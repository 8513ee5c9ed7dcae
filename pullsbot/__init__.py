"""
Slack bot that reports an organization's open GitHub issues and pull requests
filtered by per-team snippets.
"""
