# Shared module for modular monolith architecture
#
# This module contains common utilities shared across all modules:
# - exceptions.py: Base exceptions, error kinds and custom exception handler
# - utils.py: Utility functions (slugs, query parameter parsing)
# - health/: Health check endpoints
