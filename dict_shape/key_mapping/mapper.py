"""Path utilities for separator-joined flat keys."""

from __future__ import annotations


class PathMapper:
    """Map between separator-joined flat keys and nested path segments."""

    def __init__(self, sep: str = ".") -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def join(self, prefix: str, key: str) -> str:
        """Append one key to a flat path prefix."""
        if not prefix:
            return key
        return f"{prefix}{self.sep}{key}"

    def split(self, path: str) -> tuple[str, ...]:
        """Split a flat key into its path segments.

        Empty segments are kept, so ``"a..b"`` yields ``("a", "", "b")``.
        """
        return tuple(path.split(self.sep))
