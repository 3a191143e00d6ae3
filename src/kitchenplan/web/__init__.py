"""FastAPI REST API for kitchen placement.

This module provides a REST API for resolving object placement, generating
worktop and plinth surfaces, and validating scene configurations.

Usage:
    uvicorn kitchenplan.web:app --reload
"""

from kitchenplan.web.app import app, create_app

__all__ = ["app", "create_app"]
