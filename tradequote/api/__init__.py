"""
API routers
"""

from tradequote.api import auth, branding, quotes

__all__ = ["auth", "branding", "quotes"]
