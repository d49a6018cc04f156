# src/solresolve/errors.py
"""Failure kinds raised while resolving a project configuration.

Every error aborts the whole resolution: callers never receive a partially
built ProjectConfig. All of them derive from ValueError so the CLI treats
them as controlled (user-facing) termination.
"""


class ResolutionError(ValueError):
    """Base class for all resolution failures."""

    code: int = 1


class InvalidRootError(ResolutionError):
    """The project root does not exist or is not a directory."""

    def __init__(self, root: object, reason: str = "does not exist") -> None:
        self.root = root
        super().__init__(f"Invalid project root {str(root)!r}: {reason}")


class MalformedRemappingError(ResolutionError):
    """A remapping line could not be parsed into ``prefix=target``."""

    def __init__(self, line: str, source: str | None = None) -> None:
        self.line = line
        self.source = source
        where = f" (from {source})" if source else ""
        super().__init__(f"Could not parse remapping{where}: {line!r}")


class MalformedLibraryLinkError(ResolutionError):
    """A library link is not of the form ``file:library:address``."""

    def __init__(self, link: str) -> None:
        self.link = link
        super().__init__(
            f"Could not parse library link {link!r}: "
            "expected <file>:<library>:<address>"
        )


class ConfigurationBuildError(ResolutionError):
    """Already-resolved values cannot be combined into a valid configuration."""
