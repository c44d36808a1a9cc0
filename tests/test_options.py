import pytest

from fusekit import options as o


@pytest.mark.parametrize(
    "text, expected",
    [
        ("plain", "plain"),
        (",", "\\,"),
        ("\\", "\\\\"),
        ("a\\,b", "a\\\\\\,b"),
    ],
)
def test_escape_comma(text, expected):
    assert o.escape_comma(text) == expected


def test_empty_config_gives_empty_string():
    assert o.MountConfig().get_options() == ""


def test_fs_name_escaped():
    conf = o.MountConfig().apply(o.fs_name("FuseTest,Marker"))
    assert conf.get_options() == "fsname=FuseTest\\,Marker"


def test_flags_without_values_and_order():
    conf = o.MountConfig().apply(
        o.allow_other(), o.read_only(), o.subtype("FuseTestMarker")
    )
    assert conf.get_options() == "allow_other,ro,subtype=FuseTestMarker"


@pytest.mark.parametrize(
    "factory, key",
    [
        (o.allow_dev, "dev"),
        (o.allow_suid, "suid"),
        (o.default_permissions, "default_permissions"),
        (o.allow_non_empty_mount, "nonempty"),
    ],
)
def test_simple_flags(factory, key):
    conf = o.MountConfig().apply(factory())
    assert conf.options == {key: ""}
    assert conf.get_options() == key


def test_later_option_replaces_value():
    conf = o.MountConfig().apply(o.fs_name("one"), o.fs_name("two"))
    assert conf.options == {"fsname": "two"}


@pytest.mark.parametrize(
    "factory, key",
    [
        (o.local_volume, "local"),
        (o.no_apple_double, "noappledouble"),
        (o.no_apple_xattr, "noapplexattr"),
        (o.no_browse, "nobrowse"),
        (o.excl_create, "excl_create"),
    ],
)
@pytest.mark.parametrize("platform", ["darwin", "linux", "freebsd12"])
def test_darwin_only_flags(factory, key, platform):
    conf = o.MountConfig().apply(factory(platform))
    expected = {key: ""} if platform == "darwin" else {}
    assert conf.options == expected


def test_volume_name_per_platform():
    assert o.MountConfig().apply(o.volume_name("vol", "darwin")).options == {
        "volname": "vol"
    }
    assert o.MountConfig().apply(o.volume_name("vol", "linux")).options == {}


def test_daemon_timeout_per_platform():
    darwin = o.MountConfig().apply(o.daemon_timeout("30", "darwin"))
    freebsd = o.MountConfig().apply(o.daemon_timeout("30", "freebsd13"))
    linux = o.MountConfig().apply(o.daemon_timeout("30", "linux"))
    assert darwin.options == {"daemon_timeout": "30"}
    assert freebsd.options == {"timeout": "30"}
    assert linux.options == {}


def test_max_readahead():
    conf = o.MountConfig().apply(o.max_readahead(131072))
    assert conf.max_readahead == 131072
    assert conf.options == {}


def test_max_readahead_out_of_range():
    with pytest.raises(ValueError):
        o.max_readahead(-1)


def test_init_flags_accumulate():
    conf = o.MountConfig().apply(o.async_read(), o.writeback_cache())
    assert conf.init_flags == o.InitFlags.ASYNC_READ | o.InitFlags.WRITEBACK_CACHE
    assert o.InitFlags.ASYNC_READ in conf.init_flags


def test_default_osxfuse_locations():
    conf = o.MountConfig()
    assert conf.osxfuse_locations == [o.OSXFUSE_LOCATION_V3, o.OSXFUSE_LOCATION_V2]


def test_osxfuse_locations_replaces():
    conf = o.MountConfig().apply(o.osxfuse_locations(o.MACFUSE_LOCATION))
    assert conf.osxfuse_locations == [o.MACFUSE_LOCATION]


def test_osxfuse_locations_copies_caller_list():
    paths = [o.MACFUSE_LOCATION, o.OSXFUSE_LOCATION_V2]
    conf = o.MountConfig().apply(o.osxfuse_locations(*paths))
    paths.clear()
    assert conf.osxfuse_locations == [o.MACFUSE_LOCATION, o.OSXFUSE_LOCATION_V2]


def test_osxfuse_locations_empty_raises():
    with pytest.raises(ValueError):
        o.MountConfig().apply(o.osxfuse_locations())


def test_location_values_through_config():
    default = o.MountConfig().osxfuse_locations
    assert default[0].daemon_var == "MOUNT_OSXFUSE_DAEMON_PATH"
    assert default[1].daemon_var == "MOUNT_FUSEFS_DAEMON_PATH"
    chosen = o.MountConfig().apply(o.osxfuse_locations(o.MACFUSE_LOCATION))
    assert chosen.osxfuse_locations[0].device_prefix == "/dev/macfuse"