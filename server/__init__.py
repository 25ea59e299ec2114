"""
Server package exposing the FastAPI sync app and its hub.
"""

from .app import app, create_app  # noqa: F401
from .hub import SyncHub  # noqa: F401
