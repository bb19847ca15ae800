"""clihelpers - small stateless helpers for command-line programs."""

__version__ = "0.1.0"
