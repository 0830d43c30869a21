from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass, field
from typing import Callable

from application.ports import GitHubApi, WorkspaceFiles
from domain.errors import ErrorKind
from domain.models import ChangeSet, CommitMessage


STATUS_COMMITTED = "committed"
STATUS_NO_CHANGES = "no_changes"
STATUS_FAILED = "failed"

DEFAULT_COMMIT_MESSAGE = "Commit files via GitHub API"


def _noop_observe_change_set(_: ChangeSet) -> None:
    return None


def _noop_observe_step(_: str, __: str, detail: str | None = None) -> None:
    return None


def _noop_group(_: str) -> AbstractContextManager[None]:
    return nullcontext()


@dataclass(frozen=True)
class CommitFlowConfig:
    file_paths: tuple[str, ...]
    repository_owner: str
    repository_name: str
    branch_name: str = ""
    commit_message: CommitMessage = field(
        default_factory=lambda: CommitMessage.parse(DEFAULT_COMMIT_MESSAGE)
    )


@dataclass(frozen=True)
class CommitFlowDependencies:
    github: GitHubApi
    workspace: WorkspaceFiles
    observe_change_set: Callable[[ChangeSet], None] = _noop_observe_change_set
    observe_step: Callable[[str, str, str | None], None] = _noop_observe_step
    group: Callable[[str], AbstractContextManager[None]] = _noop_group


@dataclass(frozen=True)
class CommitFlowResult:
    status: str
    message: str
    branch: str | None = None
    commit_oid: str | None = None
    commit_url: str | None = None
    error_kind: ErrorKind | None = None
