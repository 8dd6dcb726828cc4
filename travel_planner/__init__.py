"""Travel Planner API: leave balances, holiday-aware calendar and vacation plans."""
__version__ = "1.0.0"
