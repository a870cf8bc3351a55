[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netprobe"
version = "0.1.0"
description = "Measure UDP/TCP throughput, packet loss and jitter, and resolve host names"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "throughput", "jitter", "packet loss", "udp", "tcp", "probe"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netprobe = "netprobe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["netprobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
