[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lumicore"
version = "1.4.0"
description = "Core helpers for a node-based control application: ring buffers, persistent attributes, signals, utilities and a threaded WebSocket client"
requires-python = ">=3.10"
keywords = ["ring buffer", "circular buffer", "attributes", "signals", "cbor", "websocket"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "cbor2",
    "websocket-client",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lumicore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
