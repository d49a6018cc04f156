# src/solresolve/utils/utils_paths.py


from pathlib import Path

from solresolve.constants import GIT_DIR


def find_git_root(start: Path) -> Path | None:
    """Return the closest directory at or above ``start`` containing ``.git``.

    Walks from ``start`` up to the filesystem root. Returns None when no
    repository is found.
    """
    current = start
    while True:
        if (current / GIT_DIR).exists():
            return current
        parent = current.parent
        if parent == current:  # Reached filesystem root
            return None
        current = parent


def shorten_path_for_display(path: Path | str, *, root: Path | None = None) -> str:
    """Shorten an absolute path for display purposes.

    Returns the path relative to ``root`` when it lives underneath it,
    ``.`` for the root itself, and the absolute path otherwise.
    """
    path_obj = Path(path)
    if root is None:
        return str(path_obj)
    try:
        rel = path_obj.relative_to(root)
    except ValueError:
        return str(path_obj)
    return str(rel) or "."


def shorten_paths_for_display(
    paths: list[Path] | list[str] | list[Path | str],
    *,
    root: Path | None = None,
) -> list[str]:
    """Apply shorten_path_for_display to each path in the list."""
    return [shorten_path_for_display(p, root=root) for p in paths]
