"""FUSE protocol version numbers and the features they imply."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Protocol:
    """A FUSE protocol version number, such as 7.12."""

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"

    def lt(self, other: Protocol) -> bool:
        """Return whether this version is lower than ``other``."""
        return self.major < other.major or (
            self.major == other.major and self.minor < other.minor
        )

    def ge(self, other: Protocol) -> bool:
        """Return whether this version is at least ``other``."""
        return self.major > other.major or (
            self.major == other.major and self.minor >= other.minor
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Protocol):
            return NotImplemented
        return self.lt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Protocol):
            return NotImplemented
        return self.ge(other)

    def _at_least(self, minor: int) -> bool:
        return self.ge(Protocol(7, minor))

    def has_attr_block_size(self) -> bool:
        """Whether the kernel respects the attribute block size."""
        return self._at_least(9)

    def has_read_write_flags(self) -> bool:
        """Whether read and write requests carry valid flags."""
        return self._at_least(9)

    def has_getattr_flags(self) -> bool:
        """Whether getattr requests carry valid flags."""
        return self._at_least(9)

    def has_open_non_seekable(self) -> bool:
        """Whether open responses may mark a handle non-seekable."""
        return self._at_least(10)

    def has_umask(self) -> bool:
        """Whether create, mkdir and mknod requests carry a umask."""
        return self._at_least(12)

    def has_invalidate(self) -> bool:
        """Whether node and entry invalidation is supported."""
        return self._at_least(12)