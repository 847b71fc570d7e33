# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the review domain:
# - test_models.py: Pydantic entity validation and immutability
# - test_crud_service.py: Generic CRUD orchestration
# - test_review_service.py: Submission, filtering and approval workflow
# - test_entity_services.py: User and POS services
# - test_memory_store.py: In-memory data adapters
# - test_app.py: Settings, exceptions and service wiring
#
# Run tests with: pytest
# =============================================================================
