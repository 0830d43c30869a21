from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar


T = TypeVar("T")


class ErrorKind(str, Enum):
    FILES_REQUIRED = "files_required"
    INVALID_FILE_PATH = "invalid_file_path"
    NO_FILE_CHANGES = "no_file_changes"
    BRANCH_NOT_FOUND = "branch_not_found"
    PARENT_COMMIT_UNRESOLVABLE = "parent_commit_unresolvable"
    REMOTE_CALL_FAILURE = "remote_call_failure"


@dataclass(frozen=True)
class CommitError:
    kind: ErrorKind
    message: str


class RemoteCallError(RuntimeError):
    """Raised by remote API adapters when a call fails at the transport or API level."""


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Outcome of a single flow stage: either a value or a CommitError, never both."""

    value: T | None = None
    error: CommitError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def ok(value: T) -> StepResult[T]:
    return StepResult(value=value)


def err(error: CommitError) -> StepResult:
    return StepResult(error=error)


def files_required() -> CommitError:
    return CommitError(ErrorKind.FILES_REQUIRED, "Input required and not supplied: files")


def invalid_file_path(file_path: str, reason: str) -> CommitError:
    return CommitError(ErrorKind.INVALID_FILE_PATH, f"file path '{file_path}' {reason}")


def no_file_changes() -> CommitError:
    return CommitError(ErrorKind.NO_FILE_CHANGES, "No changes found")


def branch_not_found(branch_name: str) -> CommitError:
    return CommitError(
        ErrorKind.BRANCH_NOT_FOUND,
        f'Input <branch-name> "{branch_name}" not found',
    )


def parent_commit_unresolvable(branch_name: str) -> CommitError:
    return CommitError(
        ErrorKind.PARENT_COMMIT_UNRESOLVABLE,
        f'Unable to locate the parent commit of the branch "{branch_name}"',
    )


def remote_call_failure(details: str) -> CommitError:
    return CommitError(ErrorKind.REMOTE_CALL_FAILURE, details)
