from backend.engine.searchstate.history import SearchHistory

__all__ = ["SearchHistory"]
