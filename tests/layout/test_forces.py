"""Tests for force calculations."""

import numpy as np

from owlviz.layout.forces import (
    center_forces,
    link_forces,
    repulsion_forces,
    tie_break_direction,
)


class TestRepulsion:
    def test_pushes_nodes_apart(self):
        positions = np.array([[0.0, 0.0], [10.0, 0.0]])

        forces = repulsion_forces(positions, ["a", "b"], strength=-500.0, epsilon=1e-6)

        assert forces[0, 0] < 0.0
        assert forces[1, 0] > 0.0
        assert abs(forces[0, 1]) < 1e-12

    def test_inverse_square_magnitude(self):
        positions = np.array([[0.0, 0.0], [10.0, 0.0]])

        forces = repulsion_forces(positions, ["a", "b"], strength=-500.0, epsilon=1e-6)

        assert np.isclose(forces[1, 0], 500.0 / 100.0)

    def test_forces_are_opposite(self):
        positions = np.array([[1.0, 2.0], [4.0, 6.0]])

        forces = repulsion_forces(positions, ["a", "b"], strength=-30.0, epsilon=1e-6)

        assert np.allclose(forces[0], -forces[1])

    def test_coincident_nodes_separate_deterministically(self):
        positions = np.array([[5.0, 5.0], [5.0, 5.0]])

        first = repulsion_forces(positions, ["a", "b"], strength=-500.0, epsilon=1e-6)
        second = repulsion_forces(positions, ["a", "b"], strength=-500.0, epsilon=1e-6)

        assert np.all(np.isfinite(first))
        assert np.array_equal(first, second)
        assert np.allclose(first[0], -first[1])
        assert np.linalg.norm(first[0]) > 0.0

    def test_tie_break_ignores_argument_order(self):
        assert np.array_equal(tie_break_direction("a", "b"), tie_break_direction("b", "a"))
        assert np.isclose(np.linalg.norm(tie_break_direction("a", "b")), 1.0)

    def test_single_node_has_no_force(self):
        forces = repulsion_forces(np.array([[1.0, 1.0]]), ["a"], strength=-500.0, epsilon=1e-6)

        assert np.array_equal(forces, np.zeros((1, 2)))


class TestLinks:
    def test_stretched_link_pulls_together(self):
        positions = np.array([[0.0, 0.0], [50.0, 0.0]])

        forces = link_forces(
            positions, np.array([0]), np.array([1]), np.array([30.0]), strength=1.0
        )

        assert np.isclose(forces[0, 0], 20.0)
        assert np.isclose(forces[1, 0], -20.0)

    def test_compressed_link_pushes_apart(self):
        positions = np.array([[0.0, 0.0], [10.0, 0.0]])

        forces = link_forces(
            positions, np.array([0]), np.array([1]), np.array([30.0]), strength=1.0
        )

        assert forces[0, 0] < 0.0
        assert forces[1, 0] > 0.0

    def test_self_loop_is_ignored(self):
        positions = np.array([[3.0, 4.0]])

        forces = link_forces(
            positions, np.array([0]), np.array([0]), np.array([30.0]), strength=1.0
        )

        assert np.array_equal(forces, np.zeros((1, 2)))

    def test_no_links(self):
        positions = np.array([[3.0, 4.0]])

        forces = link_forces(
            positions, np.array([], dtype=int), np.array([], dtype=int), np.array([]), 1.0
        )

        assert np.array_equal(forces, np.zeros((1, 2)))


class TestCenter:
    def test_pulls_towards_center(self):
        forces = center_forces(np.array([[100.0, 100.0]]), (0.0, 0.0), 0.1)

        assert np.allclose(forces, [[-10.0, -10.0]])
