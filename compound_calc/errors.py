"""Error types shared by the calculator core and the API."""

from __future__ import annotations

from typing import List


class InvalidDomainError(ValueError):
    """Raised when calculator inputs fall outside the range the engine accepts."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors
