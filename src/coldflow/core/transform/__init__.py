# src/coldflow/core/transform/__init__.py
"""Transformação pura do coldflow (multiplicação por fator)."""

from .multiply import ensure_factor, is_numeric, multiply_by, multiply_each

__all__ = ["ensure_factor", "is_numeric", "multiply_by", "multiply_each"]
