"""Generate a Lua REST client module for Defold from a Swagger document."""

__version__ = "0.1.0"
