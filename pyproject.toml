[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tweetapi"
version = "0.1.0"
description = "Client for the Twitter v2 tweet endpoints: lookup, recent search, filtered and sampled streams, stream rules and reply hiding"
requires-python = ">=3.10"
keywords = ["twitter", "api", "client", "tweets", "stream"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "httpx>=0.24",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
tweetapi = "tweetapi.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tweetapi"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
