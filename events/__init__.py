"""
Public event mapping for engine event logs.
"""

from .mapper import map_event, map_events  # noqa: F401
