# fusekit

Building blocks for programs that serve FUSE file systems:

- **Mount options** (`fusekit.options`): build the `-o` option string passed
  to a FUSE mount helper. Options that only some systems honour are handled
  per platform.
- **Protocol versions** (`fusekit.protocol`): compare FUSE protocol versions
  and ask which kernel features a negotiated version supports.
- **Unmounting** (`fusekit.unmount`): unmount a FUSE file system.
- **Extended attributes** (`fusekit.xattr`): get, list, set and remove xattrs,
  and flush memory mappings to disk.

## Installation

```
pip install fusekit
```

## Mount options

```python
from fusekit.options import MountConfig, fs_name, read_only, allow_other, volume_name

config = MountConfig()
config.apply(fs_name("myfs"), read_only(), allow_other(), volume_name("My FS", "darwin"))
print(config.get_options())   # "fsname=myfs,ro,allow_other,volname=My FS"
```

A mount option is a callable that changes a `MountConfig`.
`MountConfig.apply(*options)` applies the options in order and returns the
config. `get_options()` joins the options in the order they were first set.
Keys and values pass through `escape_comma`, which escapes backslashes and
commas, so a name such as `"a,b"` comes out as `a\,b`. An option with an empty
value appears as its key alone.

Options that set `-o` flags:

| function | flag |
|---|---|
| `fs_name(name)` | `fsname=<name>` |
| `subtype(fstype)` | `subtype=<fstype>` |
| `allow_other()` | `allow_other` |
| `allow_dev()` | `dev` |
| `allow_suid()` | `suid` |
| `default_permissions()` | `default_permissions` |
| `read_only()` | `ro` |
| `allow_non_empty_mount()` | `nonempty` |

The following functions take an optional `platform` argument. It defaults to
`sys.platform`, and `"darwin"`, `"freebsd…"` and everything else are treated
as macOS, FreeBSD and Linux. On platforms that ignore the option, the returned
option does nothing.

- `local_volume`, `volume_name(name)`, `no_apple_double`, `no_apple_xattr`,
  `no_browse` and `excl_create` apply on macOS only. They set `local`,
  `volname`, `noappledouble`, `noapplexattr`, `nobrowse` and `excl_create`.
- `daemon_timeout(name)` sets `daemon_timeout` on macOS and `timeout` on
  FreeBSD.

Options that set fields of the config instead of `-o` flags:

- `max_readahead(n)` sets `max_readahead`. It raises `ValueError` unless
  `0 <= n < 2**32`.
- `async_read()` adds `InitFlags.ASYNC_READ` to `init_flags`.
- `writeback_cache()` adds `InitFlags.WRITEBACK_CACHE` to `init_flags`.
- `osxfuse_locations(*paths)` replaces `osxfuse_locations`, a list of
  `OSXFUSEPaths`. The default list is `[OSXFUSE_LOCATION_V3,
  OSXFUSE_LOCATION_V2]`. `MACFUSE_LOCATION` is also provided. Applying the
  option with no paths raises `ValueError`.

## Protocol versions

```python
from fusekit.protocol import Protocol

proto = Protocol(7, 12)
str(proto)                       # "7.12"
proto.ge(Protocol(7, 9))         # True
proto < Protocol(8, 0)           # True
proto.has_invalidate()           # True
Protocol(7, 8).has_umask()       # False
```

The feature queries and the versions they require:

- From 7.9: `has_attr_block_size`, `has_read_write_flags` and
  `has_getattr_flags`.
- From 7.10: `has_open_non_seekable`.
- From 7.12: `has_umask` and `has_invalidate`.

## Unmounting

```python
from fusekit.unmount import unmount, UnmountError

try:
    unmount("/mnt/myfs")
except UnmountError as exc:
    print(exc, exc.path)
```

On Linux this runs `fusermount -u <dir>`. On other systems it runs
`umount <dir>`. A failure raises `UnmountError`, a subclass of `OSError`. The
error message includes the command's output when there is any.

## Extended attributes

```python
from fusekit.xattr import getxattr, getxattr_size, listxattr, setxattr, removexattr

setxattr("file.txt", "user.greeting", b"hello, world", 0)
getxattr("file.txt", "user.greeting")        # b"hello, world"
getxattr_size("file.txt", "user.greeting")   # 12
listxattr("file.txt")                        # ["user.greeting"]
removexattr("file.txt", "user.greeting")
```

Failures are raised as `OSError` carrying the system's errno. Where the
platform offers no xattr calls, the errno is `ENOTSUP`. `msync(mapping)`
flushes a writable `mmap.mmap` back to its file.

## What this package does not do

It does not mount file systems, and it does not talk to the kernel FUSE device
or serve file system requests. It provides the option strings, version checks,
unmounting and xattr helpers that such a server would use.

## Running the tests

```
pip install -e .[test]
pytest
```