"""
HTTP surface of the Quote Service: the application factory and the `/quote` route.
"""

from quote_service.api.app import create_app
from quote_service.api.handlers import router

__all__ = [
    "create_app",
    "router",
]
