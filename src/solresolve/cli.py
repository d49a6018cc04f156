# src/solresolve/cli.py

import argparse
import json
import platform
import sys
from collections.abc import Mapping
from difflib import get_close_matches
from pathlib import Path

from .config import (
    ProjectConfig,
    Remapping,
    inputs_from_args,
    parse_remapping,
    project_config_to_dict,
    resolve_project_config,
)
from .config.config_types import EvmVersion
from .constants import (
    DEFAULT_ENV_CONTRACTS,
    DEFAULT_ENV_LIBRARIES,
    DEFAULT_ENV_REMAPPINGS,
    DEFAULT_EVM_VERSION,
    DEFAULT_OPTIMIZER_RUNS,
)
from .errors import MalformedRemappingError
from .logs import getAppLogger
from .meta import PROGRAM_DISPLAY, PROGRAM_SCRIPT, __version__
from .utils import literal_to_set, shorten_path_for_display, shorten_paths_for_display


LOG_LEVEL_CHOICES = ["trace", "debug", "info", "warning", "error", "critical", "silent"]


# --------------------------------------------------------------------------- #
# CLI setup and helpers
# --------------------------------------------------------------------------- #


class HintingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        # Build known option strings: ["-v", "--verbose", "--log-level", ...]
        known_opts: list[str] = []
        for action in self._actions:
            known_opts.extend([s for s in action.option_strings if s])

        hint_lines: list[str] = []
        # "unrecognized arguments: --evm-verison ..."
        if "unrecognized arguments:" in message:
            bad = message.split("unrecognized arguments:", 1)[1].strip()
            bad_args = [tok for tok in bad.split() if tok.startswith("-")]
            for arg in bad_args:
                close = get_close_matches(arg, known_opts, n=1, cutoff=0.6)
                if close:
                    hint_lines.append(f"Hint: did you mean {close[0]}?")

        self.print_usage(sys.stderr)
        full = f"{self.prog}: error: {message}"
        if hint_lines:
            full += "\n" + "\n".join(hint_lines)
        self.exit(2, full + "\n")


def _remapping_arg(value: str) -> Remapping:
    try:
        return parse_remapping(value, source="--remappings")
    except MalformedRemappingError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _setup_parser() -> argparse.ArgumentParser:
    """Define and return the CLI argument parser."""
    parser = HintingArgumentParser(
        prog=PROGRAM_SCRIPT,
        description=(
            "Resolve a Solidity project's paths, remappings, library links and "
            "compiler settings into a single configuration (printed as JSON)."
        ),
    )

    # --- Paths ---
    parser.add_argument(
        "--root",
        type=Path,
        help=(
            "The project's root path. Defaults to the root of the current git "
            "repository, or the current working directory outside of one."
        ),
    )
    layout = parser.add_mutually_exclusive_group()
    layout.add_argument(
        "-c",
        "--contracts",
        type=Path,
        help=(
            "Directory (relative to the root) holding the contracts. "
            f"Falls back to ${DEFAULT_ENV_CONTRACTS}."
        ),
    )
    layout.add_argument(
        "--hardhat",
        "--hh",
        action="store_true",
        help=(
            "Use a Hardhat-style layout. Same as "
            "`--contracts contracts --lib-paths node_modules`."
        ),
    )
    parser.add_argument(
        "-o",
        "--out",
        type=Path,
        help="Directory (relative to the root) where artifacts are stored.",
    )
    parser.add_argument(
        "--lib-paths",
        nargs="+",
        action="extend",
        type=Path,
        metavar="PATH",
        help="The paths where your libraries are installed. May be repeated.",
    )

    # --- Remappings ---
    parser.add_argument(
        "-r",
        "--remappings",
        nargs="+",
        action="extend",
        type=_remapping_arg,
        metavar="PREFIX=TARGET",
        help="Import remappings. May be repeated.",
    )
    parser.add_argument(
        "--remappings-env",
        metavar="TEXT",
        help=(
            "Newline-separated remappings. "
            f"Falls back to ${DEFAULT_ENV_REMAPPINGS}."
        ),
    )

    # --- Compiler ---
    parser.add_argument(
        "--optimize",
        action="store_true",
        help="Enable the optimizer.",
    )
    parser.add_argument(
        "--optimize-runs",
        type=int,
        default=DEFAULT_OPTIMIZER_RUNS,
        metavar="RUNS",
        help=f"Optimizer runs (default: {DEFAULT_OPTIMIZER_RUNS}).",
    )
    parser.add_argument(
        "--evm-version",
        default=DEFAULT_EVM_VERSION,
        metavar="VERSION",
        help=(
            f"Target EVM version (default: {DEFAULT_EVM_VERSION}). One of: "
            + ", ".join(sorted(literal_to_set(EvmVersion)))
        ),
    )
    parser.add_argument(
        "--ignored-error-codes",
        nargs="+",
        action="extend",
        type=int,
        metavar="CODE",
        help="Ignore warnings with these error codes.",
    )
    parser.add_argument(
        "--libraries",
        nargs="+",
        action="extend",
        metavar="FILE:LIB:ADDRESS",
        help=(
            "Linked libraries, as <file>:<library>:<address>. "
            f"Falls back to ${DEFAULT_ENV_LIBRARIES}."
        ),
    )
    parser.add_argument(
        "--no-auto-detect",
        action="store_true",
        help="Skip compiler auto-detection and use the one on $PATH.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Delete the cache and artifacts so everything is rebuilt.",
    )

    # --- Version and verbosity ---
    parser.add_argument("--version", action="store_true", help="Show version info.")

    log_level = parser.add_mutually_exclusive_group()
    log_level.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        const="warning",
        dest="log_level",
        help="Suppress non-critical output (same as --log-level warning).",
    )
    log_level.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="debug",
        dest="log_level",
        help="Verbose output (same as --log-level debug).",
    )
    log_level.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        default=None,
        dest="log_level",
        help="Set log verbosity level.",
    )
    return parser


# --------------------------------------------------------------------------- #
# Main entry helpers
# --------------------------------------------------------------------------- #


def _initialize_logger(args: argparse.Namespace) -> None:
    """Apply --log-level (or -q/-v); otherwise keep the env/default level."""
    logger = getAppLogger()
    if args.log_level:
        logger.setLevel(args.log_level.upper())
    logger.trace(f"[BOOT] log-level initialized: {args.log_level or 'default'}")

    logger.debug(
        "Runtime: Python %s (%s)",
        platform.python_version(),
        platform.python_implementation(),
    )


def _log_summary(project: ProjectConfig) -> None:
    # debug goes to stderr; stdout carries only the JSON
    logger = getAppLogger()
    paths = project["paths"]
    root = paths["root"]
    settings = project["settings"]

    logger.debug("📁 Project root: %s", root)
    logger.debug(
        "📂 Sources: %s  Artifacts: %s",
        shorten_path_for_display(paths["sources"], root=root),
        shorten_path_for_display(paths["artifacts"], root=root),
    )
    logger.debug(
        "📚 Libraries: %s",
        ", ".join(shorten_paths_for_display(paths["libraries"], root=root)) or "-",
    )
    logger.debug("🔀 %d remapping(s)", len(project["remappings"]))
    logger.debug(
        "Optimizer enabled=%s runs=%d, EVM %s",
        settings["optimizer"]["enabled"],
        settings["optimizer"]["runs"],
        settings["evm_version"],
    )
    if project["force_rebuild"]:
        logger.debug("🧹 Removed cached build state")


# --------------------------------------------------------------------------- #
# Main entry
# --------------------------------------------------------------------------- #


def main(
    argv: list[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> int:
    logger = getAppLogger()  # init (use env + defaults)

    try:
        parser = _setup_parser()
        args = parser.parse_args(argv)

        _initialize_logger(args)

        if args.version:
            print(f"{PROGRAM_DISPLAY} {__version__}")
            return 0

        inputs = inputs_from_args(args, env=env, cwd=Path.cwd())
        project = resolve_project_config(inputs)

        _log_summary(project)
        print(json.dumps(project_config_to_dict(project), indent=2))

    except (FileNotFoundError, ValueError, TypeError, RuntimeError) as e:
        # controlled termination
        logger.error(str(e))  # noqa: TRY400
        return getattr(e, "code", 1)

    except Exception as e:  # noqa: BLE001
        # unexpected internal error
        logger.critical("Unexpected internal error: %s", e)
        return getattr(e, "code", 1)

    else:
        return 0
