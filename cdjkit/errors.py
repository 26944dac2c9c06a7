# cdjkit/errors.py

from __future__ import annotations


class CdjkitError(Exception):
    """Base class for errors surfaced to the command line."""


class InvalidInputError(CdjkitError):
    """The scan root is missing, not a directory, or not readable."""


class ConfigError(CdjkitError):
    """A configuration value (time zone, milestone date, ...) is invalid."""
