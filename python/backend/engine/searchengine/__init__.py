from backend.engine.searchengine.engine import (
    SearchEngine,
    StateSnapshot,
    StepOutcome,
    StepResult,
    successors,
)

__all__ = ["SearchEngine", "StateSnapshot", "StepOutcome", "StepResult", "successors"]
