# src/solresolve/config/config_types.py


from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypedDict

from typing_extensions import NotRequired


LayoutPreset = Literal["default", "hardhat"]

EvmVersion = Literal[
    "homestead",
    "tangerineWhistle",
    "spuriousDragon",
    "byzantium",
    "constantinople",
    "petersburg",
    "istanbul",
    "berlin",
    "london",
]

# file -> library name -> deployed address
LibraryLinkTable = dict[str, dict[str, str]]


@dataclass(frozen=True, order=True)
class Remapping:
    """Imports starting with ``prefix`` resolve under ``target``.

    Ordering and equality are by ``(prefix, target)``.
    """

    prefix: str
    target: str

    def __str__(self) -> str:
        return f"{self.prefix}={self.target}"


# Raw inputs, already parsed to primitives by the CLI layer
class BuildInputs(TypedDict, total=False):
    root: Path | str | None
    contracts: Path | str | None
    hardhat: bool
    out: Path | str | None
    lib_paths: list[Path | str]
    remappings: list[Remapping]
    remappings_env: str | None
    optimize: bool
    optimize_runs: int
    evm_version: str
    ignored_error_codes: list[int]
    no_auto_detect: bool
    force: bool
    libraries: list[str]
    cwd: NotRequired[Path]  # base for root discovery when root is missing


# Resolved types - all fields are guaranteed to be present with final values
class ResolvedPaths(TypedDict):
    root: Path
    sources: Path
    artifacts: Path
    cache: Path  # build cache file removed on force rebuild
    libraries: list[Path]  # library search paths, in resolution order


class OptimizerSettings(TypedDict):
    enabled: bool
    runs: int


class CompilerSettings(TypedDict):
    optimizer: OptimizerSettings
    evm_version: EvmVersion
    libraries: LibraryLinkTable
    ignored_error_codes: set[int]


class ProjectConfig(TypedDict):
    paths: ResolvedPaths
    remappings: list[Remapping]  # sorted, exact duplicates removed
    allowed_paths: list[Path]  # root followed by library paths
    settings: CompilerSettings
    no_auto_detect: bool  # trust the compiler already on PATH
    force_rebuild: bool  # cached state was wiped during resolution
