from backend.engine.gamestate.state import StateHistory

__all__ = ["StateHistory"]
