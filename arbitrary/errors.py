"""Exceptions raised by the arbitrary package."""


class ArbitraryError(Exception):
    """Base exception for arbitrary construction and shrinking."""


class ArbitraryConfigError(ArbitraryError, ValueError):
    """An arbitrary was requested with an unusable configuration."""


class IsomorphismError(ArbitraryError, AssertionError):
    """A (to, from_) pair failed the round-trip check to(from_(u)) == u."""
