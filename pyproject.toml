[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "messagerie"
version = "0.1.0"
description = "A small LAN chat: a relay server and a client, each with its own window"
requires-python = ">=3.10"
keywords = ["chat", "lan", "messaging", "relay", "pygame", "tcp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "pygame",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
messagerie-client = "messagerie.client_app:main"
messagerie-server = "messagerie.server_app:main"

[tool.hatch.build.targets.wheel]
packages = ["messagerie"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
