"""Base exception for RunOrRaise."""


class RunOrRaiseError(Exception):
    """Base class for errors reported to the user."""
