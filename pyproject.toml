[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webhttpkit"
version = "0.1.0"
description = "Building blocks for HTTP clients and servers: messages, request filters, credentials, query helpers, JWT data and file-system routes."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "web", "client", "server", "redirect", "jwt", "query-string"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["webhttpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
