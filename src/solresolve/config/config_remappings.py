# src/solresolve/config/config_remappings.py


from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path

from solresolve.constants import (
    LIB_SOURCE_SUBDIRS,
    NPM_SCOPE_PREFIX,
    REMAPPINGS_FILE,
)
from solresolve.errors import MalformedRemappingError
from solresolve.logs import getAppLogger

from .config_types import Remapping


RemappingDiscovery = Callable[[Path], list[Remapping]]


# --------------------------------------------------------------------------- #
# parsing
# --------------------------------------------------------------------------- #


def parse_remapping(text: str, *, source: str | None = None) -> Remapping:
    """Parse ``prefix=target`` into a Remapping.

    The split happens at the first ``=``; both sides must be non-empty.

    Raises:
        MalformedRemappingError: If the text is not a valid remapping
    """
    prefix, sep, target = text.partition("=")
    if not sep or not prefix.strip() or not target.strip():
        raise MalformedRemappingError(text, source)
    return Remapping(prefix=prefix.strip(), target=target.strip())


def remappings_from_newline(
    text: str,
    *,
    source: str | None = None,
) -> Iterator[Remapping]:
    """Yield remappings from newline-separated text.

    Lines are stripped and empty ones skipped. There is no comment syntax;
    the first malformed line (``#`` lines included) raises
    MalformedRemappingError naming that line.
    """
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        yield parse_remapping(line, source=source)


# --------------------------------------------------------------------------- #
# auto-discovery
# --------------------------------------------------------------------------- #


def _lib_source_dir(lib_dir: Path) -> Path:
    # npm scopes (@org) hold packages, not sources
    if lib_dir.name.startswith(NPM_SCOPE_PREFIX):
        return lib_dir
    for name in LIB_SOURCE_SUBDIRS:
        candidate = lib_dir / name
        if candidate.is_dir():
            return candidate
    return lib_dir


def find_remappings(lib_path: Path) -> list[Remapping]:
    """Discover remappings for every library installed under ``lib_path``.

    Each visible subdirectory ``name`` maps ``name/`` to its source folder
    (``src``, then ``contracts``, then the library directory itself).
    npm scope directories (``@org``) always map to themselves.
    A missing or non-directory ``lib_path`` yields nothing.
    """
    logger = getAppLogger()
    if not lib_path.is_dir():
        logger.trace(f"[find_remappings] Skipping missing lib path {lib_path}")
        return []

    found: list[Remapping] = []
    for child in sorted(lib_path.iterdir()):
        if not child.is_dir() or child.name.startswith("."):
            continue
        target = _lib_source_dir(child)
        found.append(
            Remapping(prefix=f"{child.name}/", target=f"{target.as_posix()}/")
        )
    logger.trace(f"[find_remappings] {lib_path}: found {len(found)} remapping(s)")
    return found


# --------------------------------------------------------------------------- #
# aggregation
# --------------------------------------------------------------------------- #


def dedupe_remappings(remappings: Iterable[Remapping]) -> list[Remapping]:
    """Sort remappings and drop exact duplicate (prefix, target) pairs.

    Remappings sharing a prefix but pointing elsewhere are all kept.
    """
    return sorted(set(remappings))


def resolve_remappings(
    root: Path,
    lib_paths: Sequence[Path],
    *,
    remappings: Sequence[Remapping] = (),
    remappings_env: str | None = None,
    discover: RemappingDiscovery | None = None,
) -> list[Remapping]:
    """Collect remappings from all sources, then sort and dedupe them.

    Sources, in order:
      1. auto-discovery for each library path
      2. explicit remappings
      3. newline-separated override text (usually from the environment)
      4. ``root/remappings.txt`` when it exists

    Raises:
        MalformedRemappingError: If a line from (3) or (4) cannot be parsed
    """
    logger = getAppLogger()
    discover = discover or find_remappings

    collected: list[Remapping] = []
    for lib in lib_paths:
        collected.extend(discover(lib))
    logger.trace(f"[resolve_remappings] {len(collected)} auto-discovered")

    collected.extend(remappings)

    if remappings_env:
        collected.extend(remappings_from_newline(remappings_env, source="env"))

    remappings_file = root / REMAPPINGS_FILE
    if remappings_file.is_file():
        logger.trace(f"[resolve_remappings] Reading {remappings_file}")
        text = remappings_file.read_text(encoding="utf-8")
        collected.extend(remappings_from_newline(text, source=REMAPPINGS_FILE))
    else:
        logger.trace(f"[resolve_remappings] No {REMAPPINGS_FILE} in {root}")

    result = dedupe_remappings(collected)
    logger.trace(
        f"[resolve_remappings] {len(collected)} collected, {len(result)} unique"
    )
    return result
