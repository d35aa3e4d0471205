"""Symbol maps, file bookkeeping, line indexing and LSP-shaped conversions for TableGen tooling."""

__version__ = "0.1.0"