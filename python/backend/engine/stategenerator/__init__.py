from backend.engine.stategenerator.generator import StateGenerator

__all__ = ["StateGenerator"]
