"""
阶段判定模块：十字 / F2L槽位 / 顶层朝向与排列
"""
from enum import Enum
from typing import List, NamedTuple, Optional

from .cube import Cube


class ElementType(Enum):
    CORNERS = 'corner'
    EDGES = 'edge'


class CheckMode(Enum):
    ORIENTED = 'oriented'
    PERMUTED = 'permuted'


class SlotCount(NamedTuple):
    side: Optional[str]
    count: int


def sides_with_cross_solved(cube: Cube) -> List[str]:
    """所有棱块都已还原的面（与角块无关）"""
    return [
        side for side, stickers in cube.sides.items()
        if all(cube.is_element_solved(s) for s in stickers if cube.is_edge_sticker(s))
    ]


def solved_slots(cube: Cube) -> SlotCount:
    """
    在有十字的面里，找还原槽位最多的那个面
    槽位还原 = 该面上的角块 + 去掉首字母得到的中层棱块 都已还原
    并列时取面序中靠前的；没有十字时返回 (None, 0)
    """
    per_cross = []
    for side in sides_with_cross_solved(cube):
        count = sum(
            1 for s in cube.sides[side]
            if cube.is_corner_sticker(s)
            and cube.is_element_solved(s)       # 槽位角块
            and cube.is_element_solved(s[1:])   # 对应的棱块
        )
        per_cross.append(SlotCount(side, count))
    if not per_cross:
        return SlotCount(None, 0)
    return max(per_cross, key=lambda slot: slot.count)


def check_elements_on_side(cube: Cube, side: str, elements: ElementType, mode: CheckMode) -> bool:
    if not isinstance(elements, ElementType):
        raise ValueError(f"Unrecognized elements type: {elements!r}")
    stickers = [
        s for s in cube.stickers
        if s.startswith(side) and cube.sticker_type(s) == elements.value
    ]

    if mode is CheckMode.ORIENTED:
        return all(cube.is_sticker_solved(s) for s in stickers)
    if mode is CheckMode.PERMUTED:
        # 顶层可能差一个任意角度，四个角度都要试。
        # 必须固定转满四次、不能提前退出：四个90°正好回到原位，调用结束后魔方不变。
        permuted = False
        for _ in range(4):
            cube.apply_moves(side)
            permuted = permuted or all(cube.is_element_permuted(s) for s in stickers)
        return permuted
    raise ValueError(f"Unrecognized mode: {mode!r}")


def are_ll_edges_oriented(cube: Cube, ll_side: str) -> bool:
    return check_elements_on_side(cube, ll_side, ElementType.EDGES, CheckMode.ORIENTED)


def are_ll_corners_oriented(cube: Cube, ll_side: str) -> bool:
    return check_elements_on_side(cube, ll_side, ElementType.CORNERS, CheckMode.ORIENTED)


def are_ll_corners_permuted(cube: Cube, ll_side: str) -> bool:
    return check_elements_on_side(cube, ll_side, ElementType.CORNERS, CheckMode.PERMUTED)


def are_ll_elements_relatively_solved(cube: Cube, ll_side: str) -> bool:
    """顶层相对还原：转动顶层四次，任一角度下整个魔方还原即可（同样转满四次）"""
    solved = False
    for _ in range(4):
        cube.apply_moves(ll_side)
        solved = solved or cube.is_solved()
    return solved
