from application.ports.github_api import GitHubApi
from application.ports.workspace_files import WorkspaceFiles

__all__ = [
    "GitHubApi",
    "WorkspaceFiles",
]
