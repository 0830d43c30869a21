from pathlib import PurePosixPath

from domain.errors import StepResult, err, invalid_file_path, ok


def normalize_file_path(file_path: str) -> StepResult[str]:
    stripped_path = file_path.strip()
    # Empty or whitespace-only entries are not paths.
    if not stripped_path:
        return err(invalid_file_path(file_path, "must be a non-empty string"))

    # Paths travel to the API with "/" separators only.
    if "\\" in stripped_path:
        return err(invalid_file_path(file_path, "must use '/' as separator"))

    if stripped_path.startswith("~"):
        return err(invalid_file_path(file_path, "must not start with '~'"))

    normalized_path = PurePosixPath(stripped_path)
    if normalized_path.is_absolute():
        return err(invalid_file_path(file_path, "must be repository-relative, not absolute"))

    # PurePosixPath already folds "./" prefixes and repeated separators.
    if any(part in {"", ".", ".."} for part in normalized_path.parts):
        return err(invalid_file_path(file_path, "contains invalid path traversal segments"))

    if not normalized_path.parts:
        return err(invalid_file_path(file_path, "must name a file inside the repository"))

    return ok(normalized_path.as_posix())
