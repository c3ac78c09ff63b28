"""Path normalization utilities for cross-platform compatibility."""

from pathlib import Path


def normalize_path(path: str) -> str:
    """Convert any path to canonical forward slash format.

    Reports and link targets are compared in POSIX form regardless of the
    host platform.

    Args:
        path: Path with any separator format

    Returns:
        Path with forward slashes only

    Examples:
        >>> normalize_path("02-ownership-borrowing\\\\README.md")
        '02-ownership-borrowing/README.md'
        >>> normalize_path("../01-fundamentals/README_ID.md")
        '../01-fundamentals/README_ID.md'
    """
    if not path:
        return path

    return path.replace("\\", "/")


def display_path(path: Path, root: Path) -> str:
    """Render a path relative to the module root for reports.

    Falls back to the normalized absolute path when the file lives outside
    the root (e.g. a broken link target).
    """
    try:
        relative = path.relative_to(root)
    except ValueError:
        return normalize_path(str(path))
    return relative.as_posix()
