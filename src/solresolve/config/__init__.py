# src/solresolve/config/__init__.py

"""Configuration resolution for solresolve.

Turns raw build inputs into a fully resolved ProjectConfig: root, paths,
remappings, library links and compiler settings.
"""

from .config_inputs import inputs_from_args, split_env_list
from .config_paths import (
    DEFAULT_LAYOUT,
    ConventionalLayout,
    LayoutStrategy,
    find_fave_or_alt_path,
    resolve_paths,
    resolve_root,
)
from .config_remappings import (
    RemappingDiscovery,
    dedupe_remappings,
    find_remappings,
    parse_remapping,
    remappings_from_newline,
    resolve_remappings,
)
from .config_resolve import (
    cleanup_build_state,
    project_config_to_dict,
    resolve_project_config,
)
from .config_settings import (
    assemble_settings,
    parse_library_link,
    parse_library_links,
    resolve_evm_version,
)
from .config_types import (
    BuildInputs,
    CompilerSettings,
    EvmVersion,
    LayoutPreset,
    LibraryLinkTable,
    OptimizerSettings,
    ProjectConfig,
    Remapping,
    ResolvedPaths,
)


__all__ = [  # noqa: RUF022
    # config_inputs
    "inputs_from_args",
    "split_env_list",
    # config_paths
    "DEFAULT_LAYOUT",
    "ConventionalLayout",
    "LayoutStrategy",
    "find_fave_or_alt_path",
    "resolve_paths",
    "resolve_root",
    # config_remappings
    "RemappingDiscovery",
    "dedupe_remappings",
    "find_remappings",
    "parse_remapping",
    "remappings_from_newline",
    "resolve_remappings",
    # config_resolve
    "cleanup_build_state",
    "project_config_to_dict",
    "resolve_project_config",
    # config_settings
    "assemble_settings",
    "parse_library_link",
    "parse_library_links",
    "resolve_evm_version",
    # config_types
    "BuildInputs",
    "CompilerSettings",
    "EvmVersion",
    "LayoutPreset",
    "LibraryLinkTable",
    "OptimizerSettings",
    "ProjectConfig",
    "Remapping",
    "ResolvedPaths",
]
