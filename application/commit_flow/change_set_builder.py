from typing import Sequence

from application.ports import WorkspaceFiles
from domain.change_set import normalize_file_path
from domain.errors import StepResult, err, invalid_file_path, ok
from domain.models import ChangeSet, FileAddition, FileDeletion


def build_change_set(file_paths: Sequence[str], workspace: WorkspaceFiles) -> StepResult[ChangeSet]:
    """Classify each path by presence in the workspace.

    Existing files become additions carrying their current bytes, directories expand to
    the files beneath them and missing paths become deletions. Symbolic links are rejected.
    A path is classified once; later repeats are ignored. Content is never compared against
    the remote branch.
    """
    additions: list[FileAddition] = []
    deletions: list[FileDeletion] = []
    seen_paths: set[str] = set()

    def add_file(path: str) -> None:
        if path in seen_paths:
            return
        seen_paths.add(path)
        additions.append(FileAddition(path=path, contents=workspace.read_bytes(path)))

    for raw_path in file_paths:
        normalized = normalize_file_path(raw_path)
        if normalized.failed:
            return err(normalized.error)
        path = normalized.value

        # A link could point outside the workspace; its target is never uploaded.
        if workspace.is_symlink(path):
            return err(invalid_file_path(raw_path, "must not be or pass through a symbolic link"))
        if workspace.is_file(path):
            add_file(path)
        elif workspace.is_directory(path):
            for nested_path in workspace.list_files(path):
                add_file(nested_path)
        elif path not in seen_paths:
            seen_paths.add(path)
            deletions.append(FileDeletion(path=path))

    return ok(ChangeSet(additions=tuple(additions), deletions=tuple(deletions)))
