import collections
from typing import Dict, List, Sequence, Tuple, Union

from .core.cube import Cube, FACE_ORDER
from .core.moves import string_to_moves


class CubeState:
    """High-level cube wrapper: sets up the position a solution is analyzed from."""

    def __init__(self):
        self.cube = Cube()

    def apply_scramble(self, scramble: Union[str, Sequence[str]]) -> List[str]:
        moves = string_to_moves(scramble) if isinstance(scramble, str) else list(scramble)
        self.cube.apply_moves(moves)
        return moves

    def load_facelets(self, state_string: str) -> bool:
        """Replace the cube with a scanned 54-character URFDLB facelet string."""
        if not self.is_counts_valid(state_string)[0]:
            print(f"状态串计数错误: {state_string}")
            return False
        if not self.centers_ok(state_string):
            print("中心块重复或顺序错误")
            return False
        if not self.is_solvable(state_string):
            print("状态不可解")
            return False
        self.cube = Cube.from_facelet_string(state_string)
        return True

    @staticmethod
    def is_counts_valid(state_string: str) -> Tuple[bool, Dict[str, int]]:
        """Each of the six face letters must appear exactly nine times."""
        if len(state_string) != 54:
            return False, {}
        cnt = collections.Counter(state_string)
        valid = all(cnt.get(ch, 0) == 9 for ch in "URFDLB")
        return valid, dict(cnt)

    @staticmethod
    def centers_ok(state_string: str) -> bool:
        centers = [state_string[k * 9 + 4] for k in range(len(FACE_ORDER))]
        return centers == FACE_ORDER

    @staticmethod
    def is_solvable(state_string: str) -> bool:
        valid, _ = CubeState.is_counts_valid(state_string)
        if not valid:
            return False
        import kociemba
        try:
            kociemba.solve(state_string)
            return True
        except ValueError:
            return False

