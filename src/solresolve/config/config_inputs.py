# src/solresolve/config/config_inputs.py


import argparse
import os
import re
from collections.abc import Mapping
from pathlib import Path

from solresolve.constants import (
    DEFAULT_ENV_CONTRACTS,
    DEFAULT_ENV_LIBRARIES,
    DEFAULT_ENV_REMAPPINGS,
    DEFAULT_EVM_VERSION,
    DEFAULT_OPTIMIZE,
    DEFAULT_OPTIMIZER_RUNS,
)
from solresolve.logs import getAppLogger

from .config_types import BuildInputs


_LIST_SPLIT = re.compile(r"[,\s]+")


def split_env_list(value: str) -> list[str]:
    """Split a comma- or whitespace-separated environment value."""
    return [item for item in _LIST_SPLIT.split(value) if item]


def _env_value(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key)
    if value is None or not value.strip():
        return None
    return value


def inputs_from_args(
    args: argparse.Namespace,
    *,
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> BuildInputs:
    """Bind parsed CLI args plus environment fallbacks into BuildInputs.

    CLI values win over environment values. This is the only place the
    environment is consulted; the resolver itself only sees BuildInputs.

    Environment fallbacks:
      - DAPP_SRC        -> contracts
      - DAPP_REMAPPINGS -> remappings_env
      - DAPP_LIBRARIES  -> libraries
    """
    logger = getAppLogger()
    env = os.environ if env is None else env

    contracts = getattr(args, "contracts", None)
    if contracts is None:
        contracts = _env_value(env, DEFAULT_ENV_CONTRACTS)
        if contracts is not None:
            logger.trace(f"[inputs_from_args] contracts from ${DEFAULT_ENV_CONTRACTS}")

    remappings_env = getattr(args, "remappings_env", None)
    if remappings_env is None:
        remappings_env = _env_value(env, DEFAULT_ENV_REMAPPINGS)

    libraries: list[str] = list(getattr(args, "libraries", None) or [])
    if not libraries:
        env_libraries = _env_value(env, DEFAULT_ENV_LIBRARIES)
        if env_libraries is not None:
            libraries = split_env_list(env_libraries)

    optimize_runs = getattr(args, "optimize_runs", None)
    evm_version = getattr(args, "evm_version", None)

    inputs: BuildInputs = {
        "root": getattr(args, "root", None),
        "contracts": contracts,
        "hardhat": bool(getattr(args, "hardhat", False)),
        "out": getattr(args, "out", None),
        "lib_paths": list(getattr(args, "lib_paths", None) or []),
        "remappings": list(getattr(args, "remappings", None) or []),
        "remappings_env": remappings_env,
        "optimize": bool(getattr(args, "optimize", DEFAULT_OPTIMIZE)),
        "optimize_runs": (
            DEFAULT_OPTIMIZER_RUNS if optimize_runs is None else optimize_runs
        ),
        "evm_version": DEFAULT_EVM_VERSION if evm_version is None else evm_version,
        "ignored_error_codes": list(getattr(args, "ignored_error_codes", None) or []),
        "no_auto_detect": bool(getattr(args, "no_auto_detect", False)),
        "force": bool(getattr(args, "force", False)),
        "libraries": libraries,
    }
    if cwd is not None:
        inputs["cwd"] = cwd
    return inputs
