"""
Application-level constants for hardcoded business logic.

These values define safety limits and internal behaviour and are not
configurable via environment variables. For configurable values see
catalog/settings.py.
"""

# ============================================================================
# Pagination Safety Limits
# ============================================================================

# Upper bound for the `limit` query parameter on list endpoints
MAX_PAGE_SIZE = 100

# Upper bound for the `page` query parameter; keeps the row offset within a
# signed 64-bit integer for every allowed page size
MAX_PAGE = (2**63 - 1) // MAX_PAGE_SIZE


# ============================================================================
# Correlation IDs
# ============================================================================

# Correlation IDs are truncated to this many characters
CORRELATION_ID_LENGTH = 8

CORRELATION_ID_HEADER = "X-Correlation-ID"


# ============================================================================
# Logging
# ============================================================================

# Maximum size of a single JSON log line before the message is truncated
MAX_LOG_SIZE_BYTES = 64 * 1024

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
