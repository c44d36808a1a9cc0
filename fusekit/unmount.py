"""Unmounting a mounted FUSE file system."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Union


class UnmountError(OSError):
    """Raised when a file system could not be unmounted."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


def _run(command: list[str], path: str) -> tuple[int, str]:
    try:
        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        raise UnmountError(f"exec: {command[0]}: {exc}", path) from exc
    output = result.stdout.decode(errors="replace") if result.stdout else ""
    return result.returncode, output


def unmount(directory: Union[str, os.PathLike]) -> None:
    """Try to unmount the file system mounted at ``directory``."""
    path = os.fspath(directory)
    if sys.platform.startswith("linux"):
        code, output = _run(["fusermount", "-u", path], path)
        if code != 0:
            message = f"exit status {code}"
            if output:
                message += ": " + output.rstrip("\n")
            raise UnmountError(message, path)
        return
    code, output = _run(["umount", path], path)
    if code != 0:
        detail = output.strip() or f"exit status {code}"
        raise UnmountError(f"unmount {path}: {detail}", path)