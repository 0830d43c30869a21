from dataclasses import dataclass


COMMIT_TYPENAME = "Commit"


@dataclass(frozen=True)
class FileAddition:
    path: str
    contents: bytes


@dataclass(frozen=True)
class FileDeletion:
    path: str


@dataclass(frozen=True)
class ChangeSet:
    additions: tuple[FileAddition, ...] = ()
    deletions: tuple[FileDeletion, ...] = ()

    @property
    def file_count(self) -> int:
        return len(self.additions) + len(self.deletions)

    @property
    def is_empty(self) -> bool:
        return self.file_count == 0

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(addition.path for addition in self.additions) + tuple(
            deletion.path for deletion in self.deletions
        )


@dataclass(frozen=True)
class HistoryNode:
    typename: str
    oid: str | None = None

    @property
    def is_commit(self) -> bool:
        return self.typename == COMMIT_TYPENAME and bool(self.oid)


@dataclass(frozen=True)
class BranchRef:
    name: str
    # Newest first; index 0 is the branch tip.
    history: tuple[HistoryNode, ...] = ()


@dataclass(frozen=True)
class RepositoryRef:
    name_with_owner: str
    default_branch_ref: BranchRef | None
    ref: BranchRef | None = None


@dataclass(frozen=True)
class ParentCommit:
    oid: str


@dataclass(frozen=True)
class CommitMessage:
    headline: str
    body: str = ""

    @classmethod
    def parse(cls, text: str) -> "CommitMessage":
        headline, _, body = text.strip().partition("\n")
        return cls(headline=headline.strip(), body=body.strip())


@dataclass(frozen=True)
class CommitRequest:
    repository_name_with_owner: str
    branch_name: str
    expected_head_oid: str
    change_set: ChangeSet
    message: CommitMessage


@dataclass(frozen=True)
class CommitResult:
    oid: str | None = None
    url: str | None = None
