"""API routes package"""

from . import health, meals, favorites, planner, grocery, settings

__all__ = ["health", "meals", "favorites", "planner", "grocery", "settings"]
