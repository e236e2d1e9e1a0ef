"""
Seeder exceptions.

SeedError
├── SeedConnectionError    - store unreachable, bad URI, credentials rejected
└── SeedOperationError     - a delete/insert failed or a document is invalid
    └── FixtureIntegrityError - fixture references break a role/ownership rule
"""
from typing import Optional


class SeedError(Exception):
    """Base exception for the seeder."""

    def __init__(self, message: str, step: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.step = step

    def __str__(self) -> str:
        if self.step:
            return f"[{self.step}] {self.message}"
        return self.message


class SeedConnectionError(SeedError):
    """Raised when the document store cannot be reached."""

    def __init__(self, message: str = "Could not connect to MongoDB"):
        super().__init__(message, step="connect")


class SeedOperationError(SeedError):
    """Raised when a delete or insert against a collection fails."""


class FixtureIntegrityError(SeedOperationError):
    """Raised when fixture data references the wrong kind of record."""
