"""
Middleware package for corsgate.
"""

from corsgate.middleware.base import Middleware
from corsgate.middleware.cors import CORSMiddleware

__all__ = [
    "Middleware",
    "CORSMiddleware",
]
