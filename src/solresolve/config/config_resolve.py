# src/solresolve/config/config_resolve.py


import shutil
from typing import Any

from solresolve.constants import (
    DEFAULT_EVM_VERSION,
    DEFAULT_OPTIMIZE,
    DEFAULT_OPTIMIZER_RUNS,
)
from solresolve.errors import ConfigurationBuildError
from solresolve.logs import getAppLogger

from .config_paths import LayoutStrategy, resolve_paths, resolve_root
from .config_remappings import RemappingDiscovery, resolve_remappings
from .config_settings import assemble_settings, parse_library_links
from .config_types import (
    BuildInputs,
    LayoutPreset,
    ProjectConfig,
    ResolvedPaths,
)


# --------------------------------------------------------------------------- #
# helpers
# --------------------------------------------------------------------------- #


def cleanup_build_state(paths: ResolvedPaths) -> None:
    """Remove the build cache file and the artifacts directory.

    Missing entries are fine; any other filesystem error is fatal.

    Raises:
        ConfigurationBuildError: If something exists but cannot be removed
    """
    logger = getAppLogger()
    cache = paths["cache"]
    artifacts = paths["artifacts"]
    try:
        if cache.exists():
            logger.debug("Removing build cache %s", cache)
            cache.unlink()
        if artifacts.exists():
            logger.debug("Removing artifacts %s", artifacts)
            if artifacts.is_dir() and not artifacts.is_symlink():
                shutil.rmtree(artifacts)
            else:
                artifacts.unlink()
    except OSError as e:
        xmsg = f"Failed to clean previous build state: {e}"
        raise ConfigurationBuildError(xmsg) from e


def _validate_paths(paths: ResolvedPaths) -> None:
    if paths["sources"].resolve() == paths["artifacts"].resolve():
        xmsg = (
            "Sources and artifacts must be different directories "
            f"(both are {paths['sources']})"
        )
        raise ConfigurationBuildError(xmsg)


def _preset_from_inputs(inputs: BuildInputs) -> LayoutPreset:
    if inputs.get("hardhat", False):
        return "hardhat"
    return "default"


# --------------------------------------------------------------------------- #
# entry point
# --------------------------------------------------------------------------- #


def resolve_project_config(
    inputs: BuildInputs,
    *,
    layout: LayoutStrategy | None = None,
    discover: RemappingDiscovery | None = None,
) -> ProjectConfig:
    """Turn raw build inputs into a fully resolved ProjectConfig.

    Runs, in order: root -> paths -> remappings -> library links ->
    compiler settings, then wipes cached build state when ``force`` is set.
    Any failure aborts the whole resolution.

    Args:
        inputs: Raw inputs (see BuildInputs); missing keys take defaults
        layout: Directory heuristics for unspecified paths
        discover: Remapping auto-discovery for each library path

    Raises:
        ResolutionError: Any of its subclasses, on the first failure
    """
    logger = getAppLogger()
    logger.trace("[resolve_project_config] Starting resolution")

    # 1. root
    root = resolve_root(inputs.get("root"), cwd=inputs.get("cwd"))

    # 2. directories
    paths = resolve_paths(
        root,
        contracts=inputs.get("contracts"),
        out=inputs.get("out"),
        lib_paths=inputs.get("lib_paths") or [],
        preset=_preset_from_inputs(inputs),
        layout=layout,
    )
    _validate_paths(paths)

    # 3. remappings (depend on library paths)
    remappings = resolve_remappings(
        root,
        paths["libraries"],
        remappings=inputs.get("remappings") or [],
        remappings_env=inputs.get("remappings_env"),
        discover=discover,
    )

    # 4. library links
    libraries = parse_library_links(inputs.get("libraries") or [])

    # 5. compiler settings
    settings = assemble_settings(
        optimize=inputs.get("optimize", DEFAULT_OPTIMIZE),
        optimize_runs=inputs.get("optimize_runs", DEFAULT_OPTIMIZER_RUNS),
        evm_version=inputs.get("evm_version", DEFAULT_EVM_VERSION),
        libraries=libraries,
        ignored_error_codes=inputs.get("ignored_error_codes") or [],
    )

    force = bool(inputs.get("force", False))
    project: ProjectConfig = {
        "paths": paths,
        "remappings": remappings,
        "allowed_paths": [root, *paths["libraries"]],
        "settings": settings,
        "no_auto_detect": bool(inputs.get("no_auto_detect", False)),
        "force_rebuild": force,
    }

    # must finish before the config is handed out
    if force:
        cleanup_build_state(paths)

    logger.trace("[resolve_project_config] Resolution complete")
    return project


def project_config_to_dict(project: ProjectConfig) -> dict[str, Any]:
    """Render a ProjectConfig as JSON-ready data (strings, lists, dicts)."""
    paths = project["paths"]
    settings = project["settings"]
    return {
        "paths": {
            "root": str(paths["root"]),
            "sources": str(paths["sources"]),
            "artifacts": str(paths["artifacts"]),
            "cache": str(paths["cache"]),
            "libraries": [str(p) for p in paths["libraries"]],
        },
        "remappings": [str(r) for r in project["remappings"]],
        "allowed_paths": [str(p) for p in project["allowed_paths"]],
        "settings": {
            "optimizer": dict(settings["optimizer"]),
            "evm_version": settings["evm_version"],
            "libraries": {
                file: dict(libs) for file, libs in settings["libraries"].items()
            },
            "ignored_error_codes": sorted(settings["ignored_error_codes"]),
        },
        "no_auto_detect": project["no_auto_detect"],
        "force_rebuild": project["force_rebuild"],
    }
