# src/solresolve/config/config_paths.py


from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from solresolve.constants import (
    ARTIFACTS_DIR_CANDIDATES,
    DEFAULT_CACHE_DIR,
    DEFAULT_CACHE_FILE,
    HARDHAT_ARTIFACTS_DIR,
    HARDHAT_LIBS_DIR,
    HARDHAT_SOURCES_DIR,
    LIBS_DIR_CANDIDATES,
    SOURCE_DIR_CANDIDATES,
)
from solresolve.errors import ConfigurationBuildError, InvalidRootError
from solresolve.logs import getAppLogger
from solresolve.utils import find_git_root

from .config_types import LayoutPreset, ResolvedPaths


# --------------------------------------------------------------------------- #
# layout heuristics
# --------------------------------------------------------------------------- #


class LayoutStrategy(Protocol):
    """Picks default directories when the caller did not name them."""

    def find_source_dir(self, root: Path) -> Path: ...

    def find_artifacts_dir(self, root: Path) -> Path: ...

    def find_libs(self, root: Path) -> list[Path]: ...


def find_fave_or_alt_path(root: Path, fave: str, alt: str) -> Path:
    """Return ``root/fave`` unless it is missing and ``root/alt`` exists."""
    fave_path = root / fave
    if not fave_path.exists():
        alt_path = root / alt
        if alt_path.exists():
            return alt_path
    return fave_path


class ConventionalLayout:
    """DappTools-style layout (src/out/lib) with Hardhat names as fallback."""

    def __init__(
        self,
        sources: tuple[str, str] = SOURCE_DIR_CANDIDATES,
        artifacts: tuple[str, str] = ARTIFACTS_DIR_CANDIDATES,
        libs: tuple[str, str] = LIBS_DIR_CANDIDATES,
    ) -> None:
        self.sources = sources
        self.artifacts = artifacts
        self.libs = libs

    def find_source_dir(self, root: Path) -> Path:
        return find_fave_or_alt_path(root, *self.sources)

    def find_artifacts_dir(self, root: Path) -> Path:
        return find_fave_or_alt_path(root, *self.artifacts)

    def find_libs(self, root: Path) -> list[Path]:
        return [find_fave_or_alt_path(root, *self.libs)]


DEFAULT_LAYOUT: LayoutStrategy = ConventionalLayout()


# --------------------------------------------------------------------------- #
# root
# --------------------------------------------------------------------------- #


def resolve_root(root: Path | str | None, *, cwd: Path | None = None) -> Path:
    """Resolve the project root to an absolute, canonical directory.

    When ``root`` is None, the closest git repository above ``cwd`` is used,
    falling back to ``cwd`` itself. A relative ``root`` is taken relative to
    ``cwd`` (the process working directory when not given).

    Raises:
        InvalidRootError: If the root does not exist or is not a directory
    """
    logger = getAppLogger()
    base = cwd if cwd is not None else Path.cwd()
    if root is None:
        root = find_git_root(base) or base
        logger.trace(f"[resolve_root] No root given, discovered {root}")

    candidate = base / Path(root).expanduser()
    try:
        resolved = candidate.resolve(strict=True)
    except FileNotFoundError as e:
        raise InvalidRootError(root) from e
    except (OSError, RuntimeError) as e:
        raise InvalidRootError(root, str(e)) from e

    if not resolved.is_dir():
        raise InvalidRootError(root, "not a directory")

    logger.trace(f"[resolve_root] Root resolved to {resolved}")
    return resolved


# --------------------------------------------------------------------------- #
# individual directories
# --------------------------------------------------------------------------- #


def _resolve_sources(
    root: Path,
    contracts: Path | str | None,
    preset: LayoutPreset,
    layout: LayoutStrategy,
) -> Path:
    if contracts is not None:
        return root / contracts
    if preset == "hardhat":
        return root / HARDHAT_SOURCES_DIR
    # no source directory was provided, determine it from the layout
    return layout.find_source_dir(root)


def _resolve_artifacts(
    root: Path,
    out: Path | str | None,
    preset: LayoutPreset,
    layout: LayoutStrategy,
) -> Path:
    if out is not None:
        return root / out
    if preset == "hardhat":
        return root / HARDHAT_ARTIFACTS_DIR
    return layout.find_artifacts_dir(root)


def _resolve_libraries(
    root: Path,
    lib_paths: Sequence[Path | str],
    preset: LayoutPreset,
    layout: LayoutStrategy,
) -> list[Path]:
    hardhat_libs = root / HARDHAT_LIBS_DIR

    if not lib_paths:
        if preset == "hardhat":
            return [hardhat_libs]
        return layout.find_libs(root)

    # explicit paths are kept verbatim (duplicates included)
    libs = [Path(p) for p in lib_paths]
    if preset == "hardhat" and not any(
        # relative entries are compared as if anchored at root
        (root / lib).resolve() == hardhat_libs.resolve()
        for lib in libs
    ):
        libs.append(hardhat_libs)
    return libs


# --------------------------------------------------------------------------- #
# entry point
# --------------------------------------------------------------------------- #


def resolve_paths(  # noqa: PLR0913
    root: Path,
    *,
    contracts: Path | str | None = None,
    out: Path | str | None = None,
    lib_paths: Sequence[Path | str] = (),
    preset: LayoutPreset = "default",
    layout: LayoutStrategy | None = None,
) -> ResolvedPaths:
    """Derive source, artifact, cache and library paths for ``root``.

    Explicit values always win. The Hardhat preset supplies
    contracts/artifacts/node_modules; otherwise the layout strategy probes
    ``root`` for conventional directory names.

    Raises:
        ConfigurationBuildError: If an explicit source directory is combined
            with the Hardhat preset
    """
    logger = getAppLogger()
    layout = layout or DEFAULT_LAYOUT

    if preset == "hardhat" and contracts is not None:
        xmsg = (
            "An explicit contracts directory cannot be combined with the "
            f"hardhat layout (got {str(contracts)!r})"
        )
        raise ConfigurationBuildError(xmsg)

    sources = _resolve_sources(root, contracts, preset, layout)
    artifacts = _resolve_artifacts(root, out, preset, layout)
    libraries = _resolve_libraries(root, lib_paths, preset, layout)
    cache = root / DEFAULT_CACHE_DIR / DEFAULT_CACHE_FILE

    logger.trace(
        f"[resolve_paths] preset={preset} sources={sources} "
        f"artifacts={artifacts} libraries={libraries}"
    )
    return {
        "root": root,
        "sources": sources,
        "artifacts": artifacts,
        "cache": cache,
        "libraries": libraries,
    }
