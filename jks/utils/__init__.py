"""
Shared helpers for the JKS toolchain.
"""

from .logging import get_logger

__all__ = ["get_logger"]
