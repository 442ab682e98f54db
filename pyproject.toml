[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lanchat"
version = "0.1.0"
description = "Console client and in-memory message stores for a small LAN chat with a global room and private conversations"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "lan", "messaging", "console", "tcp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
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
test = ["pytest"]

[project.scripts]
lanchat = "lanchat.client:main"

[tool.hatch.build.targets.wheel]
packages = ["lanchat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
