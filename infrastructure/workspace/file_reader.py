import logging
import subprocess
from pathlib import Path, PurePosixPath

from infrastructure.observability import log_event


logger = logging.getLogger(__name__)

_IGNORED_DIRECTORIES = {".git"}
_GIT_TIMEOUT_SECONDS = 30


class WorkspaceFileReader:
    """Read-only view of the checked out workspace, addressed by repository-relative paths.

    Symbolic links are never followed. Directory expansion honours git ignore rules when the
    workspace is a git worktree.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def _resolve(self, path: str) -> Path:
        return self.root / path

    def is_symlink(self, path: str) -> bool:
        current = self.root
        for part in PurePosixPath(path).parts:
            current = current / part
            if current.is_symlink():
                return True
        return False

    def is_file(self, path: str) -> bool:
        return not self.is_symlink(path) and self._resolve(path).is_file()

    def is_directory(self, path: str) -> bool:
        return not self.is_symlink(path) and self._resolve(path).is_dir()

    def _git_listed_files(self, directory: str) -> list[str] | None:
        # Tracked plus untracked-but-not-ignored files, as `git add <directory>` would stage them.
        command = ["git", "ls-files", "-z", "--cached", "--others", "--exclude-standard", "--", directory]
        try:
            result = subprocess.run(
                command,
                cwd=self.root,
                capture_output=True,
                text=True,
                timeout=_GIT_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.TimeoutExpired) as error:
            log_event(logger, logging.WARNING, "workspace.git.unavailable", error=str(error))
            return None
        if result.returncode != 0:
            log_event(
                logger,
                logging.INFO,
                "workspace.git.not_a_worktree",
                root=str(self.root),
                stderr=result.stderr.strip(),
            )
            return None
        return [file_path for file_path in result.stdout.split("\0") if file_path]

    def _walk_files(self, directory: str) -> list[str]:
        file_paths = []
        for file_path in self._resolve(directory).rglob("*"):
            relative_path = file_path.relative_to(self.root)
            if any(part in _IGNORED_DIRECTORIES for part in relative_path.parts):
                continue
            file_paths.append(relative_path.as_posix())
        return file_paths

    def list_files(self, directory: str) -> list[str]:
        candidates = self._git_listed_files(directory)
        if candidates is None:
            candidates = self._walk_files(directory)
        # Deleted tracked files and links are not additions.
        return sorted({file_path for file_path in candidates if self.is_file(file_path)})

    def read_bytes(self, path: str) -> bytes:
        return self._resolve(path).read_bytes()
