from infrastructure.github.github_client import DEFAULT_GRAPHQL_URL, DEFAULT_TIMEOUT_SECONDS, GitHubClient

__all__ = [
    "DEFAULT_GRAPHQL_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "GitHubClient",
]
