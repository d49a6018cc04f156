# src/solresolve/meta.py
"""Program identity used for logger names, env prefixes and CLI display."""

PROGRAM_PACKAGE: str = "solresolve"
PROGRAM_SCRIPT: str = "solresolve"
PROGRAM_DISPLAY: str = "SolResolve"
PROGRAM_ENV: str = "SOLRESOLVE"

__version__: str = "0.1.0"
