from backend.engine.gamegenerator.generator import GameGenerator
from backend.engine.gamegenerator.rng import RandomState, new_seed

__all__ = ["GameGenerator", "RandomState", "new_seed"]
