from backend.models.candidates import Candidate, CandidateSet
from backend.models.direction import LOCKED, Direction
from backend.models.params import PRESETS, GameParams
from backend.models.state import GameState

__all__ = [
    "Candidate",
    "CandidateSet",
    "Direction",
    "GameParams",
    "GameState",
    "LOCKED",
    "PRESETS",
]
