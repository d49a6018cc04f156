# src/solresolve/constants.py
"""Central constants used across the project."""

# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"
DEFAULT_ENV_CONTRACTS: str = "DAPP_SRC"
DEFAULT_ENV_REMAPPINGS: str = "DAPP_REMAPPINGS"
DEFAULT_ENV_LIBRARIES: str = "DAPP_LIBRARIES"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"

# --- compiler defaults ---
DEFAULT_OPTIMIZE: bool = False
DEFAULT_OPTIMIZER_RUNS: int = 200
DEFAULT_EVM_VERSION: str = "london"

# --- project layout ---
REMAPPINGS_FILE: str = "remappings.txt"
GIT_DIR: str = ".git"

# (favourite, alternative) directory names probed by the conventional layout
SOURCE_DIR_CANDIDATES: tuple[str, str] = ("src", "contracts")
ARTIFACTS_DIR_CANDIDATES: tuple[str, str] = ("out", "artifacts")
LIBS_DIR_CANDIDATES: tuple[str, str] = ("lib", "node_modules")

# subdirectories of a library that hold its importable sources, in priority order
LIB_SOURCE_SUBDIRS: tuple[str, ...] = ("src", "contracts")
NPM_SCOPE_PREFIX: str = "@"

HARDHAT_SOURCES_DIR: str = "contracts"
HARDHAT_ARTIFACTS_DIR: str = "artifacts"
HARDHAT_LIBS_DIR: str = "node_modules"

DEFAULT_CACHE_DIR: str = "cache"
DEFAULT_CACHE_FILE: str = "solidity-files-cache.json"

# --- library linking ---
LIBRARY_LINK_SEPARATOR: str = ":"
LIBRARY_LINK_FIELDS: int = 3
