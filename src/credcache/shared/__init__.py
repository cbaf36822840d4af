"""credcache Shared Module.

This package contains error handling, logging helpers, constants and
protocols used across credcache.
"""

__all__ = ["constants", "errors", "logging", "protocols"]
