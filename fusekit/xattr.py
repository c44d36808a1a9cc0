"""Extended attribute and memory-map sync helpers with one API across platforms.

Position and option arguments of the macOS calls are left out.
"""

from __future__ import annotations

import errno
import mmap
import os
from typing import Any, Callable, Union

PathLike = Union[str, bytes, os.PathLike]


def _require(name: str, lookup: Callable[[], Any]) -> Callable[..., Any]:
    """Return the platform call found by ``lookup`` or raise ENOTSUP."""
    try:
        func = lookup()
    except AttributeError:
        func = None
    if func is None:
        raise OSError(errno.ENOTSUP, f"{name} is not supported on this platform")
    return func


def getxattr(path: PathLike, attr: str) -> bytes:
    """Return the value of extended attribute ``attr`` of ``path``."""
    return _require("getxattr", lambda: os.getxattr)(path, attr)


def getxattr_size(path: PathLike, attr: str) -> int:
    """Return the size in bytes of extended attribute ``attr``."""
    return len(getxattr(path, attr))


def listxattr(path: PathLike) -> list[str]:
    """Return the names of the extended attributes of ``path``."""
    return list(_require("listxattr", lambda: os.listxattr)(path))


def setxattr(path: PathLike, attr: str, data: bytes, flags: int = 0) -> None:
    """Set extended attribute ``attr`` of ``path`` to ``data``."""
    _require("setxattr", lambda: os.setxattr)(path, attr, bytes(data), flags)


def removexattr(path: PathLike, attr: str) -> None:
    """Remove extended attribute ``attr`` from ``path``."""
    _require("removexattr", lambda: os.removexattr)(path, attr)


def msync(mapping: mmap.mmap) -> None:
    """Synchronously write a shared memory mapping back to its file."""
    mapping.flush()