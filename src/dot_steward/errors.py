"""Exceptions surfaced to the CLI as user-facing failures."""


class DotStewardError(Exception):
    """Base class for load, validation, and execution failures."""
