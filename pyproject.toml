[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yewchat"
version = "0.1.0"
description = "A WebSocket chat client with a user list, avatars, an event bus and a terminal front end"
requires-python = ">=3.10"
dependencies = [
    "websockets>=13",
]
keywords = ["chat", "websocket", "client", "event-bus"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
yewchat = "yewchat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["yewchat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
