from cfop.core.cube import Cube, SOLVED_STATE

T_PERM = "R U R' U' R' F R2 U' R' U' R U R' F'"

# 每个三步破坏一个 D 面 F2L 槽位，D 十字保持不动
FOUR_TRIGGERS = "R U R' L' U' L R' U R L U L'"

# 状态串下标：U2=1 (UB), U8=7 (UF), U9=8 (UFR), R1=9 (UFR), F2=19 (UF), F3=20 (UFR), B2=46 (UB)
FLIPPED_UF = {7: 'F', 19: 'U'}
TWISTED_UFR = {8: 'F', 9: 'U', 20: 'R'}
SWAPPED_UF_UB = {19: 'B', 46: 'F'}


def cube_with(changes) -> Cube:
    """Solved cube with some stickers overwritten (not necessarily solvable)."""
    state = SOLVED_STATE.copy()
    for idx, value in changes.items():
        state[idx] = value
    return Cube(state)


def scrambled(moves: str) -> Cube:
    return Cube().apply_moves(moves)
