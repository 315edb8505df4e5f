[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mikupush"
version = "0.0.6"
description = "File registration, size limits and local object storage for a file sharing server"
requires-python = ">=3.10"
dependencies = []
keywords = ["upload", "file-sharing", "storage", "registration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mikupush"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
