"""
FastAPI transport adapters.

This module contains adapters for converting between domain models
and FastAPI/Starlette specific types.
"""

from __future__ import annotations
