"""Client, response objects and command line for the Twitter v2 tweet endpoints."""

__version__ = "0.1.0"

__all__ = ["auth", "cli", "client", "errors", "fields", "lookup", "objects", "params", "rules"]