[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fusekit"
version = "0.1.0"
description = "FUSE mount options, protocol versions, unmounting and extended-attribute helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuse", "filesystem", "mount", "xattr", "unmount"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Operating System :: POSIX :: BSD :: FreeBSD",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fusekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
