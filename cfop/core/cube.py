"""
魔方模型模块：贴纸状态 + 转动 + 还原判定
状态为54个贴纸，按 Kociemba 面序 U, R, F, D, L, B 排列（与状态串一致）
"""
import numpy as np
from typing import Dict, List, Sequence, Union

from .moves import parse_move, string_to_moves

FACE_ORDER = ['U', 'R', 'F', 'D', 'L', 'B']

OPPOSITE = {'U': 'D', 'D': 'U', 'R': 'L', 'L': 'R', 'F': 'B', 'B': 'F'}

# 坐标系：+X → R, +Y → U, +Z → F
FACE_NORMALS = {
    'U': (0, 1, 0), 'D': (0, -1, 0),
    'R': (1, 0, 0), 'L': (-1, 0, 0),
    'F': (0, 0, 1), 'B': (0, 0, -1),
}

# 每个面九宫格的 (上方向, 右方向)，与 Kociemba 展开图一致
FACE_GRID = {
    'U': ((0, 0, -1), (1, 0, 0)),
    'R': ((0, 1, 0), (0, 0, -1)),
    'F': ((0, 1, 0), (1, 0, 0)),
    'D': ((0, 0, 1), (1, 0, 0)),
    'L': ((0, 1, 0), (0, 0, 1)),
    'B': ((0, 1, 0), (-1, 0, 0)),
}

# 贴纸命名时其余面字母的排列顺序：U/D, F/B, R/L
NAME_AXES = (1, 2, 0)


def _face_of(axis: int, sign: int) -> str:
    for face, normal in FACE_NORMALS.items():
        if normal[axis] == sign:
            return face
    raise ValueError(f"No face on axis {axis} with sign {sign}")


def _build_stickers():
    """生成54个贴纸的 (位置, 法向) 与名字。

    名字 = 所在面字母 + 该块其余面字母（按 U/D, F/B, R/L 排序）。
    角块贴纸去掉首字母即为同一F2L槽位的棱块贴纸，例如 DFR -> FR。
    """
    geometry = []
    names = []
    for face in FACE_ORDER:
        normal = np.array(FACE_NORMALS[face])
        up, right = (np.array(v) for v in FACE_GRID[face])
        for i in range(3):
            for j in range(3):
                pos = normal + up * (1 - i) + right * (j - 1)
                geometry.append((tuple(int(c) for c in pos), tuple(int(c) for c in normal)))
                axis = int(np.flatnonzero(normal)[0])
                others = [_face_of(a, int(pos[a])) for a in NAME_AXES if a != axis and pos[a] != 0]
                names.append(face + ''.join(others))
    return geometry, names


STICKER_GEOMETRY, STICKER_NAMES = _build_stickers()
STICKER_INDEX: Dict[str, int] = {name: idx for idx, name in enumerate(STICKER_NAMES)}
GEOMETRY_INDEX = {geo: idx for idx, geo in enumerate(STICKER_GEOMETRY)}

SIDES: Dict[str, List[str]] = {
    face: STICKER_NAMES[k * 9:(k + 1) * 9] for k, face in enumerate(FACE_ORDER)
}

CENTER_INDICES = np.array([k * 9 + 4 for k in range(6)])

# 同一块（相同位置）上的所有贴纸
PIECE_STICKERS: Dict[str, List[str]] = {}
for _name, (_pos, _) in zip(STICKER_NAMES, STICKER_GEOMETRY):
    PIECE_STICKERS[_name] = [n for n, (p, _n) in zip(STICKER_NAMES, STICKER_GEOMETRY) if p == _pos]

SOLVED_STATE = np.array([name[0] for name in STICKER_NAMES], dtype='<U1')

# 转动定义：(转轴 = 从外侧看顺时针的面法向, 参与转动的层 p·axis)
MOVE_AXES = {
    'U': ((0, 1, 0), {1}), 'D': ((0, -1, 0), {1}),
    'R': ((1, 0, 0), {1}), 'L': ((-1, 0, 0), {1}),
    'F': ((0, 0, 1), {1}), 'B': ((0, 0, -1), {1}),
    'u': ((0, 1, 0), {0, 1}), 'd': ((0, -1, 0), {0, 1}),
    'r': ((1, 0, 0), {0, 1}), 'l': ((-1, 0, 0), {0, 1}),
    'f': ((0, 0, 1), {0, 1}), 'b': ((0, 0, -1), {0, 1}),
    'M': ((-1, 0, 0), {0}), 'E': ((0, -1, 0), {0}), 'S': ((0, 0, 1), {0}),
    'x': ((1, 0, 0), {-1, 0, 1}), 'y': ((0, 1, 0), {-1, 0, 1}), 'z': ((0, 0, 1), {-1, 0, 1}),
}


def _quarter_turn_permutation(axis, layers) -> np.ndarray:
    """顺时针90°（沿转轴向内看）的置换：new_state = state[perm]"""
    a = np.array(axis)
    perm = np.arange(len(STICKER_GEOMETRY))
    for src, (pos, normal) in enumerate(STICKER_GEOMETRY):
        p = np.array(pos)
        if int(p @ a) not in layers:
            continue
        # 绕 a 旋转 -90°：v' = -(a × v) + a (a·v)
        p_rot = -np.cross(a, p) + a * int(a @ p)
        n = np.array(normal)
        n_rot = -np.cross(a, n) + a * int(a @ n)
        dst = GEOMETRY_INDEX[(tuple(int(c) for c in p_rot), tuple(int(c) for c in n_rot))]
        perm[dst] = src
    return perm


def _build_move_table() -> Dict[str, List[np.ndarray]]:
    table = {}
    for letter, (axis, layers) in MOVE_AXES.items():
        quarter = _quarter_turn_permutation(axis, layers)
        half = quarter[quarter]
        table[letter] = [np.arange(len(quarter)), quarter, half, half[quarter]]
    return table


MOVE_TABLE = _build_move_table()


class Cube:
    """3x3x3 贴纸模型。

    还原判定都相对于中心块，因此整体转动 (x, y, z) 和中层转动后仍然成立：
    贴纸还原 = 与所在面中心同色；块还原 = 所有贴纸还原；
    块归位 = 块的颜色集合等于所在各面中心的颜色集合（忽略朝向）。
    """

    FACE_ORDER = FACE_ORDER
    OPPOSITE = OPPOSITE

    def __init__(self, state: Union[np.ndarray, Sequence[str], None] = None):
        if state is None:
            self.state = SOLVED_STATE.copy()
        else:
            self.state = np.array(list(state), dtype='<U1')
            if self.state.shape != (54,):
                raise ValueError(f"Cube state needs 54 stickers, got {self.state.size}")

    @classmethod
    def from_facelet_string(cls, state_string: str) -> "Cube":
        """从54字符的状态串（URFDLB面序）构建"""
        if len(state_string) != 54:
            raise ValueError(f"Facelet string needs 54 characters, got {len(state_string)}")
        cube = cls(state_string)
        if len(set(cube.state[CENTER_INDICES].tolist())) != 6:
            raise ValueError("Facelet string centers are not six distinct values")
        return cube

    def to_facelet_string(self) -> str:
        return ''.join(self.state.tolist())

    def copy(self) -> "Cube":
        return Cube(self.state.copy())

    @property
    def sides(self) -> Dict[str, List[str]]:
        return {face: list(stickers) for face, stickers in SIDES.items()}

    @property
    def stickers(self) -> Dict[str, str]:
        return {name: str(value) for name, value in zip(STICKER_NAMES, self.state.tolist())}

    def value(self, sticker: str) -> str:
        return str(self.state[self._index(sticker)])

    def center_value(self, face: str) -> str:
        return self.value(face)

    def sticker_type(self, sticker: str) -> str:
        self._index(sticker)
        return {1: 'center', 2: 'edge', 3: 'corner'}[len(sticker)]

    def is_center_sticker(self, sticker: str) -> bool:
        return self.sticker_type(sticker) == 'center'

    def is_edge_sticker(self, sticker: str) -> bool:
        return self.sticker_type(sticker) == 'edge'

    def is_corner_sticker(self, sticker: str) -> bool:
        return self.sticker_type(sticker) == 'corner'

    def is_sticker_solved(self, sticker: str) -> bool:
        return self.value(sticker) == self.center_value(sticker[0])

    def is_element_solved(self, sticker: str) -> bool:
        return all(self.is_sticker_solved(s) for s in PIECE_STICKERS[sticker])

    def is_element_permuted(self, sticker: str) -> bool:
        piece = PIECE_STICKERS[sticker]
        values = sorted(self.value(s) for s in piece)
        centers = sorted(self.center_value(s[0]) for s in piece)
        return values == centers

    def is_solved(self) -> bool:
        centers = self.state[CENTER_INDICES]
        return bool(np.all(self.state.reshape(6, 9) == centers[:, None]))

    def apply_moves(self, moves: Union[str, Sequence[str]]):
        """原地执行转动；单独的面名（如 'R'）即该面顺时针90°"""
        if isinstance(moves, str):
            moves = string_to_moves(moves)
        for move in moves:
            letter, turns = parse_move(move)
            self.state = self.state[MOVE_TABLE[letter][turns]]
        return self

    def _index(self, sticker: str) -> int:
        try:
            return STICKER_INDEX[sticker]
        except KeyError:
            raise ValueError(f"Unknown sticker: '{sticker}'") from None
