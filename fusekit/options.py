"""Mount options and the configuration they build up."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional


class InitFlags(enum.IntFlag):
    """Flags negotiated with the kernel at init time."""

    NONE = 0
    ASYNC_READ = 1 << 0
    WRITEBACK_CACHE = 1 << 16


@dataclass(frozen=True)
class OSXFUSEPaths:
    """Paths used by an installed OSXFUSE version."""

    device_prefix: str
    load: str
    mount: str
    daemon_var: str


MACFUSE_LOCATION = OSXFUSEPaths(
    device_prefix="/dev/macfuse",
    load="/Library/Filesystems/macfuse.fs/Contents/Resources/load_macfuse",
    mount="/Library/Filesystems/macfuse.fs/Contents/Resources/mount_macfuse",
    daemon_var="MOUNT_FUSEFS_DAEMON_PATH",
)

OSXFUSE_LOCATION_V3 = OSXFUSEPaths(
    device_prefix="/dev/osxfuse",
    load="/Library/Filesystems/osxfuse.fs/Contents/Resources/load_osxfuse",
    mount="/Library/Filesystems/osxfuse.fs/Contents/Resources/mount_osxfuse",
    daemon_var="MOUNT_OSXFUSE_DAEMON_PATH",
)

OSXFUSE_LOCATION_V2 = OSXFUSEPaths(
    device_prefix="/dev/osxfuse",
    load="/Library/Filesystems/osxfusefs.fs/Support/load_osxfusefs",
    mount="/Library/Filesystems/osxfusefs.fs/Support/mount_osxfusefs",
    daemon_var="MOUNT_FUSEFS_DAEMON_PATH",
)


def escape_comma(text: str) -> str:
    """Escape backslashes and commas for a ``-o`` option list."""
    return text.replace("\\", "\\\\").replace(",", "\\,")


@dataclass
class MountConfig:
    """Configuration for a mount, built up by applying mount options."""

    options: dict[str, str] = field(default_factory=dict)
    max_readahead: int = 0
    init_flags: InitFlags = InitFlags.NONE
    osxfuse_locations: list[OSXFUSEPaths] = field(
        default_factory=lambda: [OSXFUSE_LOCATION_V3, OSXFUSE_LOCATION_V2]
    )

    def apply(self, *args: MountOption) -> MountConfig:
        """Apply each mount option in turn and return this config."""
        for option in args:
            option(self)
        return self

    def get_options(self) -> str:
        """Return the options as one string for the ``-o`` mount flag."""
        parts = []
        for key, value in self.options.items():
            item = escape_comma(key)
            if value:
                item += "=" + escape_comma(value)
            parts.append(item)
        return ",".join(parts)


MountOption = Callable[[MountConfig], None]


def _family(platform: Optional[str]) -> str:
    name = sys.platform if platform is None else platform
    if name == "darwin":
        return "darwin"
    if name.startswith("freebsd"):
        return "freebsd"
    return "linux"


def _noop(conf: MountConfig) -> None:
    return None


def _set_flag(key: str, value: str = "") -> MountOption:
    def option(conf: MountConfig) -> None:
        conf.options[key] = value

    return option


def fs_name(name: str) -> MountOption:
    """Set the file system name shown in the list of mounts."""
    return _set_flag("fsname", name)


def subtype(fstype: str) -> MountOption:
    """Set the mount subtype, shown as ``fuse.<fstype>``."""
    return _set_flag("subtype", fstype)


def local_volume(platform: Optional[str] = None) -> MountOption:
    """Mark the volume as local rather than network (macOS only)."""
    return _set_flag("local") if _family(platform) == "darwin" else _noop


def volume_name(name: str, platform: Optional[str] = None) -> MountOption:
    """Set the volume name shown in Finder (macOS only)."""
    return _set_flag("volname", name) if _family(platform) == "darwin" else _noop


def no_apple_double(platform: Optional[str] = None) -> MountOption:
    """Disallow AppleDouble file names (macOS only)."""
    return _set_flag("noappledouble") if _family(platform) == "darwin" else _noop


def no_apple_xattr(platform: Optional[str] = None) -> MountOption:
    """Disallow ``com.apple.`` extended attributes (macOS only)."""
    return _set_flag("noapplexattr") if _family(platform) == "darwin" else _noop


def no_browse(platform: Optional[str] = None) -> MountOption:
    """Mark the volume as non-browsable (macOS only)."""
    return _set_flag("nobrowse") if _family(platform) == "darwin" else _noop


def excl_create(platform: Optional[str] = None) -> MountOption:
    """Pass O_EXCL only for truly exclusive creates (macOS only)."""
    return _set_flag("excl_create") if _family(platform) == "darwin" else _noop


def daemon_timeout(name: str, platform: Optional[str] = None) -> MountOption:
    """Set the seconds before a silent daemon is declared dead."""
    family = _family(platform)
    if family == "darwin":
        return _set_flag("daemon_timeout", name)
    if family == "freebsd":
        return _set_flag("timeout", name)
    return _noop


def allow_other() -> MountOption:
    """Allow other users to access the file system."""
    return _set_flag("allow_other")


def allow_dev() -> MountOption:
    """Interpret character and block special devices."""
    return _set_flag("dev")


def allow_suid() -> MountOption:
    """Let set-user-id and set-group-id bits take effect."""
    return _set_flag("suid")


def default_permissions() -> MountOption:
    """Make the kernel enforce access control based on file modes."""
    return _set_flag("default_permissions")


def read_only() -> MountOption:
    """Make the mount read-only."""
    return _set_flag("ro")


def max_readahead(n: int) -> MountOption:
    """Set how many bytes may be prefetched for sequential reads."""
    if not 0 <= n < 1 << 32:
        raise ValueError(f"max_readahead out of range: {n}")

    def option(conf: MountConfig) -> None:
        conf.max_readahead = n

    return option


def async_read() -> MountOption:
    """Allow several outstanding reads on one handle."""

    def option(conf: MountConfig) -> None:
        conf.init_flags |= InitFlags.ASYNC_READ

    return option


def writeback_cache() -> MountOption:
    """Let the kernel buffer writes before sending them."""

    def option(conf: MountConfig) -> None:
        conf.init_flags |= InitFlags.WRITEBACK_CACHE

    return option


def osxfuse_locations(*args: OSXFUSEPaths) -> MountOption:
    """Replace the locations searched for OSXFUSE files."""
    paths = list(args)

    def option(conf: MountConfig) -> None:
        if not paths:
            raise ValueError(
                "must specify at least one location for osxfuse_locations"
            )
        conf.osxfuse_locations = list(paths)

    return option


def allow_non_empty_mount() -> MountOption:
    """Allow mounting over a non-empty directory."""
    return _set_flag("nonempty")