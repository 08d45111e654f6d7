"""Turn-based suit-or-rank matching card game engine."""

__version__ = "0.1.0"
