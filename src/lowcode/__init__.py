"""Low-code data platform: runtime-defined models with role-based access."""

__version__ = "0.1.0"
