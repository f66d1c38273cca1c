"""GraphQL JSON-over-POST transport for FastAPI/Starlette applications."""

from __future__ import annotations

__version__ = "0.1.0"
