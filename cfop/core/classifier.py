"""
阶段分级模块：把当前魔方状态归为 0-10 的进度等级
"""
from dataclasses import dataclass
from typing import Optional

from .cube import Cube
from .predicates import (
    sides_with_cross_solved,
    solved_slots,
    are_ll_edges_oriented,
    are_ll_corners_oriented,
    are_ll_corners_permuted,
    are_ll_elements_relatively_solved,
)

NOTHING = 0
CROSS = 1
F2L_DONE = 5
LL_EDGES_ORIENTED = 6
LL_CORNERS_ORIENTED = 7
LL_CORNERS_PERMUTED = 8
LL_SOLVED = 9
CUBE_SOLVED = 10


@dataclass
class AnalysisSession:
    """一次解法分析的会话状态，每次分析都要新建，不能复用"""

    # F2L完成时顶层中心的颜色；整体转动后面名会变，颜色不会
    saved_ll_center: Optional[str] = None

    def reset(self):
        self.saved_ll_center = None


def resolve_ll_side(cube: Cube, session: AnalysisSession, cross_side: str) -> str:
    """找到当前顶层所在的面（按记住的中心颜色查找）"""
    if session.saved_ll_center is None:
        session.saved_ll_center = cube.center_value(cube.OPPOSITE[cross_side])
    for sticker, value in cube.stickers.items():
        if cube.is_center_sticker(sticker) and value == session.saved_ll_center:
            return sticker
    raise ValueError(f"No center carries value '{session.saved_ll_center}'")


def current_step_number(cube: Cube, session: AnalysisSession) -> int:
    """
    Returns one of the following numbers:
      0 - Nothing is done
      1 - Cross is solved
      2 - 1st pair is solved
      3 - 2nd pair is solved
      4 - 3rd pair is solved
      5 - 4th pair is solved
      6 - LL edges are oriented
      7 - LL corners are oriented
      8 - LL corners are permuted
      9 - LL is solved relative to the rest of the cube
      10 - The cube is solved

    When a step is done then all previous ones are done as well.
    """
    if not sides_with_cross_solved(cube):
        return NOTHING
    side, slots_count = solved_slots(cube)
    if slots_count < 4:
        return CROSS + slots_count

    ll_side = resolve_ll_side(cube, session, side)

    if not are_ll_edges_oriented(cube, ll_side):
        return F2L_DONE
    if not are_ll_corners_oriented(cube, ll_side):
        return LL_EDGES_ORIENTED
    if not are_ll_corners_permuted(cube, ll_side):
        return LL_CORNERS_ORIENTED
    if not are_ll_elements_relatively_solved(cube, ll_side):
        return LL_CORNERS_PERMUTED
    if not cube.is_solved():
        return LL_SOLVED
    return CUBE_SOLVED
