# src/solresolve/__init__.py

"""SolResolve — resolve a Solidity project's build configuration.

Full developer API
==================
This package re-exports the public symbols of its submodules for programmatic
use. Anything prefixed with "_" is considered internal and may change.

Highlights:
    - main()                    → CLI entrypoint
    - resolve_project_config()  → Turn BuildInputs into a ProjectConfig
    - resolve_paths()           → Source/artifact/library directories
    - resolve_remappings()      → Sorted, de-duplicated import remappings
    - parse_library_links()     → file:library:address → nested table
"""

from .cli import main
from .config import (
    DEFAULT_LAYOUT,
    BuildInputs,
    CompilerSettings,
    ConventionalLayout,
    EvmVersion,
    LayoutPreset,
    LayoutStrategy,
    LibraryLinkTable,
    OptimizerSettings,
    ProjectConfig,
    Remapping,
    RemappingDiscovery,
    ResolvedPaths,
    assemble_settings,
    cleanup_build_state,
    find_remappings,
    inputs_from_args,
    parse_library_links,
    parse_remapping,
    project_config_to_dict,
    resolve_paths,
    resolve_project_config,
    resolve_remappings,
    resolve_root,
)
from .errors import (
    ConfigurationBuildError,
    InvalidRootError,
    MalformedLibraryLinkError,
    MalformedRemappingError,
    ResolutionError,
)
from .logs import getAppLogger
from .meta import PROGRAM_DISPLAY, PROGRAM_PACKAGE, PROGRAM_SCRIPT, __version__


__all__ = [  # noqa: RUF022
    # cli
    "main",
    # config
    "DEFAULT_LAYOUT",
    "BuildInputs",
    "CompilerSettings",
    "ConventionalLayout",
    "EvmVersion",
    "LayoutPreset",
    "LayoutStrategy",
    "LibraryLinkTable",
    "OptimizerSettings",
    "ProjectConfig",
    "Remapping",
    "RemappingDiscovery",
    "ResolvedPaths",
    "assemble_settings",
    "cleanup_build_state",
    "find_remappings",
    "inputs_from_args",
    "parse_library_links",
    "parse_remapping",
    "project_config_to_dict",
    "resolve_paths",
    "resolve_project_config",
    "resolve_remappings",
    "resolve_root",
    # errors
    "ConfigurationBuildError",
    "InvalidRootError",
    "MalformedLibraryLinkError",
    "MalformedRemappingError",
    "ResolutionError",
    # logs
    "getAppLogger",
    # meta
    "PROGRAM_DISPLAY",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    "__version__",
]
