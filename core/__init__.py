# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the catalog logic:
# - models/: Pydantic schemas for albums and statistics
# - services/: The in-memory album store and its seed data
#
# Code in this package should NOT import from FastAPI directly.
# This keeps the store testable without an HTTP client.
# =============================================================================
