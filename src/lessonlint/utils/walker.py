"""Filesystem walker for documentation trees.

Every listing is sorted so repeated runs over an unchanged tree produce
identical results. Symlinked directories are never descended into.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md",)


class RootNotFoundError(FileNotFoundError):
    """Module root is missing, not a directory, or unreadable."""

    def __init__(self, root: Path, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"Module root {root} {reason}")


def ensure_root(root: Path) -> Path:
    """Resolve the module root and verify it can be listed.

    Raises:
        RootNotFoundError: If the root cannot be used at all
    """
    root = Path(root).resolve()
    if not root.exists():
        raise RootNotFoundError(root, "does not exist")
    if not root.is_dir():
        raise RootNotFoundError(root, "is not a directory")
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise RootNotFoundError(root, f"is not readable: {e.strerror or e}")
    return root


def list_subdirectories(root: Path, excludes: Iterable[str] = ()) -> list[str]:
    """Names of immediate subdirectories of root, minus excluded names."""
    excluded = set(excludes)
    root = ensure_root(root)
    with os.scandir(root) as entries:
        names = [
            entry.name for entry in entries
            if entry.is_dir(follow_symlinks=False) and entry.name not in excluded
        ]
    return sorted(names)


def walk_directories(root: Path, excludes: Iterable[str] = ()) -> list[str]:
    """Relative POSIX paths of every directory below root.

    Excluded names are pruned at any depth together with everything beneath
    them. The root itself is not included.
    """
    excluded = set(excludes)
    root = ensure_root(root)
    found: list[str] = []

    def on_error(error: OSError) -> None:
        logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")

    for current, dirnames, _ in os.walk(root, onerror=on_error, followlinks=False):
        dirnames[:] = sorted(
            name for name in dirnames
            if name not in excluded and not os.path.islink(os.path.join(current, name))
        )
        base = Path(current)
        for name in dirnames:
            found.append((base / name).relative_to(root).as_posix())

    return sorted(found)


def find_markdown_files(
    root: Path,
    excludes: Iterable[str] = (),
    skip_hidden: bool = True,
) -> list[Path]:
    """All Markdown files under root (root included), sorted by path."""
    root = ensure_root(root)
    directories = [root] + [root / rel for rel in walk_directories(root, excludes)]
    files: list[Path] = []

    for directory in directories:
        relative_parts = directory.relative_to(root).parts
        if skip_hidden and any(part.startswith(".") for part in relative_parts):
            continue
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.is_file() and entry.name.lower().endswith(MARKDOWN_SUFFIXES):
                        files.append(Path(entry.path))
        except OSError as e:
            logger.warning(f"Skipping unreadable directory {directory}: {e}")

    return sorted(files)


def read_markdown(path: Path) -> str:
    """Read a Markdown file as UTF-8. OSError/UnicodeDecodeError propagate."""
    return path.read_text(encoding="utf-8")
