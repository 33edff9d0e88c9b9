[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledgerdesk"
version = "1.0.0"
description = "A small interactive bank-account ledger kept in a plain text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "ledger", "deposit", "withdraw", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ledgerdesk = "ledgerdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ledgerdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
