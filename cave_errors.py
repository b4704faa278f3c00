# cave_errors.py
# Exception types for the Speleo cave simulator


class CaveError(Exception):
    """Base exception for the cave simulator."""


class InvalidInputError(CaveError):
    """Raised for malformed or out-of-range user input (prompts re-ask)."""


class InvalidArgumentError(CaveError, ValueError):
    """Raised when a caller breaks a constructor or driver contract."""
