import os
from dataclasses import dataclass, field
from pathlib import Path

from application.commit_flow import DEFAULT_COMMIT_MESSAGE
from infrastructure.actions.inputs import get_input, get_multiline_input
from infrastructure.github import DEFAULT_GRAPHQL_URL, DEFAULT_TIMEOUT_SECONDS


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _split_repository(repository: str) -> tuple[str, str]:
    owner, _, name = repository.partition("/")
    if not owner or not name or "/" in name:
        raise RuntimeError(f"GITHUB_REPOSITORY must look like 'owner/repo', got '{repository}'")
    return owner, name


def _api_timeout_seconds() -> float:
    raw_value = os.getenv("GITHUB_API_TIMEOUT")
    if not raw_value:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout_seconds = float(raw_value)
    except ValueError as error:
        raise RuntimeError(f"GITHUB_API_TIMEOUT must be a number of seconds, got '{raw_value}'") from error
    if timeout_seconds <= 0:
        raise RuntimeError(f"GITHUB_API_TIMEOUT must be positive, got '{raw_value}'")
    return timeout_seconds


@dataclass(frozen=True)
class ActionSettings:
    file_paths: tuple[str, ...]
    branch_name: str
    commit_message: str
    repository_owner: str
    repository_name: str
    workspace: Path
    graphql_url: str = DEFAULT_GRAPHQL_URL
    api_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    run_id: str = "-"
    github_token: str = field(default="", repr=False)

    @classmethod
    def from_env(cls) -> "ActionSettings":
        github_token = get_input("github-token") or os.getenv("GITHUB_TOKEN", "")
        if not github_token:
            raise RuntimeError("Missing GitHub token: set the github-token input or GITHUB_TOKEN")
        owner, name = _split_repository(_required_env("GITHUB_REPOSITORY"))
        return cls(
            # An empty list is reported by the commit flow, not here.
            file_paths=tuple(get_multiline_input("files")),
            branch_name=get_input("branch-name"),
            commit_message=get_input("commit-message") or DEFAULT_COMMIT_MESSAGE,
            repository_owner=owner,
            repository_name=name,
            workspace=Path(os.getenv("GITHUB_WORKSPACE") or Path.cwd()),
            graphql_url=os.getenv("GITHUB_GRAPHQL_URL") or DEFAULT_GRAPHQL_URL,
            api_timeout_seconds=_api_timeout_seconds(),
            run_id=os.getenv("GITHUB_RUN_ID", "-"),
            github_token=github_token,
        )
