from domain.change_set.path_policy import normalize_file_path

__all__ = [
    "normalize_file_path",
]
