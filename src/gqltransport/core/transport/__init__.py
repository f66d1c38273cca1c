"""
Transport adapters package.

Adapters convert between framework request/response types and the
transport-agnostic domain models.
"""

from __future__ import annotations
