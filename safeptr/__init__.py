"""Wrapper types that make nullability, ownership and borrowing of a reference explicit."""

__version__ = "0.0.1"
__all__ = ["ptr"]