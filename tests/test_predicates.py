"""
Tests for the cross / F2L slot / last-layer predicates.
"""

import numpy as np
import pytest

from cfop.core.cube import Cube, FACE_ORDER
from cfop.core.predicates import (
    CheckMode,
    ElementType,
    SlotCount,
    are_ll_corners_oriented,
    are_ll_corners_permuted,
    are_ll_edges_oriented,
    are_ll_elements_relatively_solved,
    check_elements_on_side,
    sides_with_cross_solved,
    solved_slots,
)

from helpers import (
    FLIPPED_UF,
    FOUR_TRIGGERS,
    SWAPPED_UF_UB,
    T_PERM,
    TWISTED_UFR,
    cube_with,
    scrambled,
)


class TestCross:

    def test_solved_cube_has_every_cross(self):
        assert sides_with_cross_solved(Cube()) == FACE_ORDER

    def test_face_turn_keeps_opposite_cross(self):
        assert sides_with_cross_solved(scrambled("R")) == ['L']
        assert sides_with_cross_solved(scrambled("F")) == ['B']

    def test_cross_ignores_corners(self):
        assert 'D' in sides_with_cross_solved(scrambled(FOUR_TRIGGERS))

    def test_no_cross(self):
        assert sides_with_cross_solved(scrambled("R U")) == []

    def test_t_perm_crosses(self):
        assert sides_with_cross_solved(scrambled(T_PERM)) == ['F', 'D', 'B']


class TestSlots:

    def test_solved_ties_break_on_face_order(self):
        assert solved_slots(Cube()) == SlotCount('U', 4)

    def test_no_cross(self):
        assert solved_slots(scrambled("R U")) == SlotCount(None, 0)

    def test_one_trigger_breaks_one_slot(self):
        assert solved_slots(scrambled("R U R'")) == SlotCount('D', 3)

    def test_four_triggers_break_every_slot(self):
        assert solved_slots(scrambled(FOUR_TRIGGERS)) == SlotCount('D', 0)

    def test_full_f2l_on_the_cross_with_most_slots(self):
        assert solved_slots(scrambled(T_PERM)) == SlotCount('D', 4)
        assert solved_slots(cube_with(FLIPPED_UF)) == SlotCount('D', 4)

    @pytest.mark.parametrize("moves", ["", "R", "R U R'", "R U", FOUR_TRIGGERS, T_PERM, "x R2 D F'"])
    def test_count_bounds(self, moves):
        assert 0 <= solved_slots(scrambled(moves)).count <= 4


class TestOrientation:

    def test_flipped_edge(self):
        cube = cube_with(FLIPPED_UF)
        assert not are_ll_edges_oriented(cube, 'U')
        assert are_ll_corners_oriented(cube, 'U')

    def test_twisted_corner(self):
        cube = cube_with(TWISTED_UFR)
        assert are_ll_edges_oriented(cube, 'U')
        assert not are_ll_corners_oriented(cube, 'U')

    def test_pll_is_oriented(self):
        cube = scrambled(T_PERM)
        assert are_ll_edges_oriented(cube, 'U')
        assert are_ll_corners_oriented(cube, 'U')


class TestPermutation:

    def test_auf_is_permuted(self):
        cube = scrambled("U")
        assert are_ll_corners_permuted(cube, 'U')
        assert are_ll_elements_relatively_solved(cube, 'U')

    def test_swapped_corners_not_permuted(self):
        assert not are_ll_corners_permuted(scrambled(T_PERM), 'U')

    def test_swapped_edges(self):
        cube = cube_with(SWAPPED_UF_UB)
        assert are_ll_corners_permuted(cube, 'U')
        assert not check_elements_on_side(cube, 'U', ElementType.EDGES, CheckMode.PERMUTED)
        assert not are_ll_elements_relatively_solved(cube, 'U')

    def test_twisted_corner_is_still_permuted(self):
        assert are_ll_corners_permuted(cube_with(TWISTED_UFR), 'U')

    def test_unrecognized_mode(self):
        with pytest.raises(ValueError):
            check_elements_on_side(Cube(), 'U', ElementType.EDGES, 'oriented')

    def test_unrecognized_elements_type(self):
        with pytest.raises(ValueError):
            check_elements_on_side(Cube(), 'U', 'edges', CheckMode.ORIENTED)


class TestRotationNeutrality:
    """Probing a side with four quarter turns must leave the cube untouched."""

    STATES = ["", "U", "R U R' U'", FOUR_TRIGGERS, T_PERM, "x y R2 F'"]

    @pytest.mark.parametrize("moves", STATES)
    @pytest.mark.parametrize("side", FACE_ORDER)
    def test_corners_permuted(self, moves, side):
        cube = scrambled(moves)
        before = cube.state.copy()
        are_ll_corners_permuted(cube, side)
        assert np.array_equal(cube.state, before)

    @pytest.mark.parametrize("moves", STATES)
    @pytest.mark.parametrize("side", FACE_ORDER)
    def test_relatively_solved(self, moves, side):
        cube = scrambled(moves)
        before = cube.state.copy()
        are_ll_elements_relatively_solved(cube, side)
        assert np.array_equal(cube.state, before)

    def test_early_success_still_turns_four_times(self):
        cube = scrambled("U'")
        before = cube.state.copy()
        # already solved after the first probe turn
        assert are_ll_elements_relatively_solved(cube, 'U')
        assert np.array_equal(cube.state, before)
