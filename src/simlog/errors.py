"""Exceptions raised by simlog."""


class SimlogError(Exception):
    """Base class for simlog errors."""


class DuplicateComponentError(SimlogError):
    """A second component tried to register under an existing name."""

    def __init__(self, name: str):
        super().__init__(f"log component '{name}' is already registered")
        self.name = name


class ConfigTokenError(SimlogError):
    """A directive in a configuration string could not be parsed."""

    def __init__(self, directive: str, token: str, reason: str = 'unknown level token'):
        super().__init__(f"{reason} '{token}' in directive '{directive}'")
        self.directive = directive
        self.token = token
        self.reason = reason
