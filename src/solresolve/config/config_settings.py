# src/solresolve/config/config_settings.py


from collections.abc import Iterable
from typing import cast

from solresolve.constants import LIBRARY_LINK_FIELDS, LIBRARY_LINK_SEPARATOR
from solresolve.errors import ConfigurationBuildError, MalformedLibraryLinkError
from solresolve.logs import getAppLogger
from solresolve.utils import literal_to_set, match_literal

from .config_types import (
    CompilerSettings,
    EvmVersion,
    LibraryLinkTable,
    OptimizerSettings,
)


# --------------------------------------------------------------------------- #
# library linking
# --------------------------------------------------------------------------- #


def parse_library_link(link: str) -> tuple[str, str, str]:
    """Split ``file:library:address`` into its three fields.

    Only the first three fields are used; anything after them is ignored.

    Raises:
        MalformedLibraryLinkError: If fewer than three fields are present or
            any of the first three is empty
    """
    fields = [f.strip() for f in link.split(LIBRARY_LINK_SEPARATOR)]
    fields = fields[:LIBRARY_LINK_FIELDS]
    if len(fields) < LIBRARY_LINK_FIELDS or not all(fields):
        raise MalformedLibraryLinkError(link)
    file, library, address = fields
    return file, library, address


def parse_library_links(links: Iterable[str]) -> LibraryLinkTable:
    """Unflatten ``file:library:address`` strings into a nested table.

    A repeated (file, library) pair keeps the last address given. Any
    malformed entry aborts parsing and no table is returned.

    Raises:
        MalformedLibraryLinkError: On the first malformed entry
    """
    logger = getAppLogger()
    table: LibraryLinkTable = {}
    for link in links:
        file, library, address = parse_library_link(link)
        by_library = table.setdefault(file, {})
        previous = by_library.get(library)
        if previous is not None and previous != address:
            logger.debug(
                "Library %s in %s linked twice; %s replaces %s",
                library,
                file,
                address,
                previous,
            )
        by_library[library] = address

    return {
        file: dict(sorted(by_library.items()))
        for file, by_library in sorted(table.items())
    }


# --------------------------------------------------------------------------- #
# compiler settings
# --------------------------------------------------------------------------- #


def resolve_evm_version(value: str) -> EvmVersion:
    """Match an EVM version name case-insensitively.

    Raises:
        ConfigurationBuildError: If the name is not a known hard fork
    """
    matched = match_literal(EvmVersion, value)
    if matched is None:
        valid_str = ", ".join(sorted(literal_to_set(EvmVersion)))
        xmsg = f"Unknown EVM version {value!r}. Must be one of: {valid_str}"
        raise ConfigurationBuildError(xmsg)
    return cast("EvmVersion", matched)


def assemble_settings(
    *,
    optimize: bool,
    optimize_runs: int,
    evm_version: str,
    libraries: LibraryLinkTable,
    ignored_error_codes: Iterable[int] = (),
) -> CompilerSettings:
    """Combine optimizer, EVM, linking and warning choices.

    Raises:
        ConfigurationBuildError: If the run count or EVM version is invalid
    """
    logger = getAppLogger()
    if isinstance(optimize_runs, bool) or not isinstance(optimize_runs, int):
        xmsg = f"Optimizer runs must be an integer, got {optimize_runs!r}"
        raise ConfigurationBuildError(xmsg)
    if optimize_runs < 0:
        xmsg = f"Optimizer runs must not be negative, got {optimize_runs}"
        raise ConfigurationBuildError(xmsg)

    ignored = set(ignored_error_codes)
    negative = sorted(code for code in ignored if code < 0)
    if negative:
        xmsg = f"Ignored error codes must not be negative, got {negative}"
        raise ConfigurationBuildError(xmsg)

    optimizer: OptimizerSettings = {"enabled": bool(optimize), "runs": optimize_runs}
    settings: CompilerSettings = {
        "optimizer": optimizer,
        "evm_version": resolve_evm_version(evm_version),
        "libraries": libraries,
        "ignored_error_codes": ignored,
    }
    logger.trace(
        f"[assemble_settings] optimizer={optimizer} "
        f"evm_version={settings['evm_version']} "
        f"ignored={sorted(settings['ignored_error_codes'])}"
    )
    return settings
