from backend.engine.gameconnectivity.connectivity import Connectivity

__all__ = ["Connectivity"]
