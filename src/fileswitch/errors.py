"""Errors raised by the switching layer itself.

Failures coming out of a backend call are never wrapped; only configuration
and initialization problems are reported through these types.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when configuration is missing, malformed or names an unusable backend."""

    pass


class RewriteError(ConfigurationError):
    """Raised when a matching rule's replacement references a group its pattern lacks."""

    pass


class BackendConstructionError(RuntimeError):
    """Raised when the delegate backend cannot be constructed or initialized."""

    pass


class AdapterStateError(RuntimeError):
    """Raised when the adapter is used before initialize() or initialized twice."""

    pass
