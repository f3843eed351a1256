"""Platform core: user lifecycle and credential management."""

__version__ = "1.0.0"
