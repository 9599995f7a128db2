[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cspnet"
version = "0.1.0"
description = "CubeSat Space Protocol building blocks: packet headers, CRC32, SHA-1/HMAC, queues, clocks, hex dumps and a ZeroMQ capture hub"
requires-python = ">=3.10"
keywords = ["csp", "cubesat", "space protocol", "networking", "zeromq", "crc32", "hmac"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]
dependencies = [
    "pyzmq",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cspnet-zmqproxy = "cspnet.zmqproxy:main"

[tool.hatch.build.targets.wheel]
packages = ["cspnet"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
