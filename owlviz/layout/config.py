"""Configuration for the force-directed layout."""

from dataclasses import dataclass, field

from ..graph.node_types import DEFAULT_REST_LENGTHS, EdgeType


@dataclass(frozen=True)
class LayoutConfig:
    """Parameters of a force simulation.

    A negative ``charge_strength`` makes nodes repel each other.
    """

    charge_strength: float = -500.0
    link_strength: float = 1.0
    center_strength: float = 0.025
    velocity_decay: float = 0.6
    alpha: float = 1.0
    alpha_decay: float = 0.0228
    alpha_min: float = 0.001
    epsilon: float = 1.0
    center: tuple[float, float] = (0.0, 0.0)
    mass: float = 1.0
    seed: int = 0
    initial_radius: float = 100.0
    rest_lengths: dict[EdgeType, float] = field(
        default_factory=lambda: dict(DEFAULT_REST_LENGTHS)
    )

    def __post_init__(self):
        if not 0.0 <= self.velocity_decay <= 1.0:
            raise ValueError("velocity_decay must be within [0, 1]")
        if not 0.0 < self.alpha_decay < 1.0:
            raise ValueError("alpha_decay must be within (0, 1)")
        if self.alpha_min < 0.0 or self.alpha < 0.0:
            raise ValueError("alpha and alpha_min must not be negative")
        if self.epsilon <= 0.0:
            raise ValueError("epsilon must be positive")
        if self.mass <= 0.0:
            raise ValueError("mass must be positive")
        if self.initial_radius < 0.0:
            raise ValueError("initial_radius must not be negative")
        missing = set(EdgeType) - set(self.rest_lengths)
        if missing:
            raise ValueError(
                f"rest_lengths is missing {sorted(t.value for t in missing)}"
            )

    def rest_length(self, edge_type: EdgeType) -> float:
        return self.rest_lengths[edge_type]
