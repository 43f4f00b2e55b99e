"""
Matrix Torus - API Layer

Read-only HTTP view of the renderer. Endpoints only see committed frames.

Structure:
- routes/     : Endpoint handlers
- schemas/    : Pydantic schemas
- middleware/ : Error handling
"""

from api.main import create_app

__all__ = ["create_app"]
