"""Stdio tool server — four demo tools exposed over MCP."""
__version__ = "1.0.0"
