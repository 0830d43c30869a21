from typing import Protocol


class WorkspaceFiles(Protocol):
    def is_symlink(self, path: str) -> bool:
        """True when path, or any directory between the workspace root and it, is a symbolic link."""

    def is_file(self, path: str) -> bool:
        ...

    def is_directory(self, path: str) -> bool:
        ...

    def list_files(self, directory: str) -> list[str]:
        """Repository-relative paths of the committable regular files under directory, sorted."""

    def read_bytes(self, path: str) -> bytes:
        ...
