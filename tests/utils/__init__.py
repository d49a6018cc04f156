# tests/utils/__init__.py

from .constants import DEFAULT_TEST_LOG_LEVEL, PROJ_ROOT
from .project import make_build_inputs, make_project_tree, no_discovery


__all__ = [  # noqa: RUF022
    # constants
    "DEFAULT_TEST_LOG_LEVEL",
    "PROJ_ROOT",
    # project
    "make_build_inputs",
    "make_project_tree",
    "no_discovery",
]
