"""Force-directed layout simulation."""

import logging
import math
from enum import Enum

import numpy as np

from ..graph.model_graph import OntologyGraph
from .config import LayoutConfig
from .forces import center_forces, link_forces, repulsion_forces

logger = logging.getLogger(__name__)


class SimulationState(str, Enum):
    """Lifecycle of a simulation."""

    INITIALIZING = "initializing"
    RUNNING = "running"
    CONVERGED = "converged"


class ForceSimulation:
    """A deterministic force-directed layout.

    The simulation keeps only its own temperature (``alpha``) between
    calls. The graph is passed into every call and borrowed for its
    duration only.
    """

    def __init__(self, config: LayoutConfig | None = None):
        self.config = config or LayoutConfig()
        self._alpha = self.config.alpha
        self._iteration = 0
        self._initialized = False

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def iteration(self) -> int:
        return self._iteration

    @property
    def state(self) -> SimulationState:
        if not self._initialized:
            return SimulationState.INITIALIZING
        if self.is_finished():
            return SimulationState.CONVERGED
        return SimulationState.RUNNING

    def is_finished(self) -> bool:
        """Check if the simulation has cooled below ``alpha_min``."""
        return self._alpha < self.config.alpha_min

    def initialize(self, graph: OntologyGraph) -> None:
        """Place every node that has no position yet.

        Free nodes are scattered within ``initial_radius`` of the center
        using the configured seed; pinned nodes are put on the center.
        """
        rng = np.random.default_rng(self.config.seed)
        cx, cy = self.config.center

        for node in graph.nodes():
            if node.position is not None:
                continue
            if node.pinned:
                graph.set_position(node.id, (cx, cy))
                continue
            radius = self.config.initial_radius * math.sqrt(rng.random())
            angle = 2.0 * math.pi * rng.random()
            graph.set_position(
                node.id, (cx + radius * math.cos(angle), cy + radius * math.sin(angle))
            )
            graph.set_velocity(node.id, (0.0, 0.0))

        self._initialized = True

    def restart(self, alpha: float | None = None) -> None:
        """Reheat the simulation, e.g. after the visible subgraph changed."""
        self._alpha = self.config.alpha if alpha is None else alpha

    def tick(self, graph: OntologyGraph) -> None:
        """Advance the simulation by one step.

        Does nothing once the simulation has converged.
        """
        if not self._initialized:
            self.initialize(graph)
        if self.is_finished():
            return

        nodes = list(graph.visible_nodes())
        if nodes:
            self._step(graph, nodes)

        self._alpha *= 1.0 - self.config.alpha_decay
        self._iteration += 1

        if self.is_finished():
            logger.debug("Simulation converged after %d ticks", self._iteration)

    def _step(self, graph: OntologyGraph, nodes: list) -> None:
        config = self.config
        index = {node.id: i for i, node in enumerate(nodes)}
        ids = [node.id for node in nodes]

        positions = np.array(
            [node.position if node.position is not None else config.center for node in nodes],
            dtype=float,
        )
        velocities = np.array([node.velocity for node in nodes], dtype=float)

        # Recover nodes whose state went non-finite before they poison others.
        broken = ~(np.isfinite(positions).all(axis=1) & np.isfinite(velocities).all(axis=1))
        positions[broken] = config.center
        velocities[broken] = 0.0

        free = np.array([not node.pinned for node in nodes], dtype=bool)
        free_idx = np.flatnonzero(free)

        edges = [
            e
            for e in graph.visible_edges()
            if e.source in index and e.target in index
        ]
        sources = np.array([index[e.source] for e in edges], dtype=int)
        targets = np.array([index[e.target] for e in edges], dtype=int)

        # Mass grows with the number of springs a node carries.
        degree = np.zeros(len(nodes))
        np.add.at(degree, sources, 1.0)
        np.add.at(degree, targets[targets != sources], 1.0)
        mass = config.mass * np.maximum(degree, 1.0)

        forces = np.zeros_like(positions)
        forces[free_idx] += repulsion_forces(
            positions[free_idx],
            [ids[i] for i in free_idx],
            config.charge_strength,
            config.epsilon,
        )
        forces += link_forces(
            positions,
            sources,
            targets,
            np.array([config.rest_length(e.type) for e in edges], dtype=float),
            config.link_strength,
        )
        forces[free_idx] += center_forces(
            positions[free_idx], config.center, config.center_strength
        )

        velocities = (velocities + forces / mass[:, np.newaxis]) * config.velocity_decay
        new_positions = positions + velocities * self._alpha

        for i, node in enumerate(nodes):
            if not free[i]:
                if broken[i]:
                    logger.debug("Resetting pinned node '%s' with non-finite position", node.id)
                    graph.set_position(node.id, config.center)
                graph.set_velocity(node.id, (0.0, 0.0))
                continue
            if broken[i] or not np.all(np.isfinite(new_positions[i])):
                logger.debug("Resetting node '%s' with non-finite position", node.id)
                graph.set_position(node.id, config.center)
                graph.set_velocity(node.id, (0.0, 0.0))
                continue
            graph.set_position(node.id, new_positions[i])
            graph.set_velocity(node.id, velocities[i])

    def run(self, graph: OntologyGraph, iterations: int) -> int:
        """Run up to ``iterations`` ticks, stopping early on convergence.

        Returns:
            The number of ticks performed.
        """
        performed = 0
        for _ in range(iterations):
            if self.is_finished():
                break
            self.tick(graph)
            performed += 1
        return performed
