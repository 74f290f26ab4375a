"""Engine errors."""

from __future__ import annotations


class InvalidSizeError(ValueError):
    """Requested pixel size cannot hold an image."""

    def __init__(self, size: object) -> None:
        super().__init__(f"Identicon size must be a positive integer, got {size!r}")
        self.size = size
