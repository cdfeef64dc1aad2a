from __future__ import annotations


class AllocationError(MemoryError):
    """Raised when a canvas or its pixel buffer cannot be created."""


class BitmapIOError(OSError):
    """Raised when the bitmap output file cannot be opened or written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to write bitmap {path}: {reason}")
        self.path = path
        self.reason = reason
