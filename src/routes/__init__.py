"""Routes package for the closure API"""
from .closure import closure_bp

__all__ = ['closure_bp']
