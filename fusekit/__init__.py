"""Helpers for FUSE file systems: mount options, protocol versions, unmounting and xattrs."""

__version__ = "0.1.0"

__all__ = ["options", "protocol", "unmount", "xattr"]