[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tdsymbols"
version = "0.1.0"
description = "Symbol tables, source-file bookkeeping and LSP conversions for TableGen language tooling"
requires-python = ">=3.10"
dependencies = []
keywords = ["tablegen", "lsp", "language-server", "symbols", "ide"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tdsymbols"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
