"""Renderer interface for snakectl.

Public API:
    Renderer -- Abstract base class
"""

from snakectl.render.base import Renderer

__all__ = ["Renderer"]
