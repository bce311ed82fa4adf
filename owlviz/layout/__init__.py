"""Force-directed layout for ontology graphs."""

from .config import LayoutConfig
from .simulation import ForceSimulation, SimulationState

__all__ = [
    "LayoutConfig",
    "ForceSimulation",
    "SimulationState",
]
