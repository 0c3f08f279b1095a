# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Album Catalog API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_album_store.py: Tests for the in-memory catalog store
# - test_api.py: Integration tests for the HTTP endpoints
# - test_config.py: Tests for settings parsing
#
# Run tests with: pytest
# =============================================================================
