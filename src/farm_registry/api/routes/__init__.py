"""Route group exports."""

from . import catalog, dashboard, farmers, health, trade

__all__ = ["catalog", "dashboard", "farmers", "health", "trade"]
