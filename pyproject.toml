[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolbench"
version = "0.1.0"
description = "Small systems utilities: hex and Base64 codecs, a framed TCP packet protocol, reader-writer locks, a semaphore, a bounded queue and a key-management HTTP client."
requires-python = ">=3.10"
keywords = [
    "hex",
    "base64",
    "rwlock",
    "semaphore",
    "bounded-queue",
    "tcp",
    "asyncio",
    "kms",
    "benchmark",
]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
    "responses>=0.23",
]

[project.scripts]
toolbench-sm9data = "toolbench.sm9data:main"
toolbench-bench = "toolbench.devhandles:main"
toolbench-server = "toolbench.server:main"
toolbench-client = "toolbench.client:main"

[tool.hatch.build.targets.wheel]
packages = ["toolbench"]

[tool.hatch.build.targets.sdist]
include = ["toolbench", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
