from infrastructure.workspace.file_reader import WorkspaceFileReader

__all__ = [
    "WorkspaceFileReader",
]
