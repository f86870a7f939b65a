"""
Exception types for Browser Sim.
"""


class BrowserSimError(Exception):
    """Base class for all Browser Sim errors."""


class EmptyQueryError(BrowserSimError, ValueError):
    """Raised when a blank query is passed to the URL resolver."""


class TabStateError(BrowserSimError):
    """Raised when the tab collection breaks its single-active invariant.

    This indicates a bug in the collection itself, never bad user input.
    """
