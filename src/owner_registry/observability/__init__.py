"""
owner_registry.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation for consistent log enrichment.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Every module logs through `observability.logging.get_logger`; there is no print/stdlib logger use.
