"""
owner_registry

Top-level package for the Owner Registry service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; the version is also reported in the OpenAPI document.
