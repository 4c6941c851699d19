[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsnp"
version = "0.1.0"
description = "Local Social Networking Protocol: plain-text profile, post and direct messages over UDP broadcast"
requires-python = ">=3.10"
dependencies = []
keywords = ["lsnp", "udp", "broadcast", "chat", "lan", "peer-to-peer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lsnp-cli = "lsnp.cli:main"
lsnp-server = "lsnp.server:main"

[tool.hatch.build.targets.wheel]
packages = ["lsnp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
