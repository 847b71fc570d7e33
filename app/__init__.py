# =============================================================================
# app/ - Application Package
# =============================================================================
# This package contains the application shell around the domain core:
# - main.py: Logging setup and service wiring (composition root)
# - config.py: Environment variable loading and settings
# - exceptions.py: Domain error taxonomy
#
# The app layer is thin - business logic lives in the core/ package.
# =============================================================================
