"""Agent Kit: AI coding-agent workspace scaffolding for Cursor, Windsurf and Antigravity."""

__version__ = "1.0.0"
