# src/solresolve/utils/__init__.py

from .utils_paths import (
    find_git_root,
    shorten_path_for_display,
    shorten_paths_for_display,
)
from .utils_types import literal_to_set, match_literal


__all__ = [  # noqa: RUF022
    # utils_paths
    "find_git_root",
    "shorten_path_for_display",
    "shorten_paths_for_display",
    # utils_types
    "literal_to_set",
    "match_literal",
]
