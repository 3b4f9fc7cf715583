"""
转动记号模块：解析 / 规范化 / 求逆 / 步数统计
"""
import re
from typing import Callable, Dict, List, Sequence, Tuple

FACE_LETTERS = 'UDFBLR'
WIDE_LETTERS = 'udfblr'
SLICE_LETTERS = 'MES'
ROTATION_LETTERS = 'xyz'

MOVE_PATTERN = r"([UDFBLRMESudfblrxyz])(w?)(\d*)('?)"
MOVE_RE = re.compile(MOVE_PATTERN)
TOKEN_RE = re.compile(r"\s*" + MOVE_PATTERN)


def _turns(letter: str, wide: str, amount: str, prime: str) -> Tuple[str, int]:
    if wide:
        if letter not in FACE_LETTERS:
            raise ValueError(f"Unrecognized move: '{letter}{wide}{amount}{prime}'")
        letter = letter.lower()
    count = int(amount) if amount else 1
    if prime:
        count = -count
    return letter, count % 4


def format_move(letter: str, turns: int) -> str:
    return letter + {0: '', 1: '', 2: '2', 3: "'"}[turns % 4]


def parse_move(move: str) -> Tuple[str, int]:
    """
    解析单个转动
    Returns:
        (层字母, 顺时针90°次数 0-3)，宽层 'Rw' 返回 'r'
    """
    m = MOVE_RE.fullmatch(move)
    if m is None:
        raise ValueError(f"Unrecognized move: '{move}'")
    return _turns(*m.groups())


def _strip_notation(text: str) -> str:
    # 去掉 // 注释、括号，统一撇号
    lines = [line.split('//', 1)[0] for line in text.splitlines()]
    text = ' '.join(lines)
    text = text.replace('’', "'").replace('`', "'")
    return re.sub(r"[()\[\]]", ' ', text).rstrip()


def string_to_moves(text: str) -> List[str]:
    """
    把记号串拆成规范化的转动列表
    例: "(R U R' U') // 注释" 或 "RUR'U'" -> ['R', 'U', "R'", "U'"]
    """
    text = _strip_notation(text or '')
    moves = []
    pos = 0
    while pos < len(text):
        m = TOKEN_RE.match(text, pos)
        if m is None:
            raise ValueError(f"Unrecognized move: '{text[pos:].split()[0]}'")
        letter, turns = _turns(*m.groups())
        if turns:
            moves.append(format_move(letter, turns))
        pos = m.end()
    return moves


def moves_to_string(moves: Sequence[str]) -> str:
    return ' '.join(moves)


def invert_move(move: str) -> str:
    letter, turns = parse_move(move)
    return format_move(letter, -turns)


def invert_moves(moves: Sequence[str]) -> List[str]:
    return [invert_move(m) for m in reversed(list(moves))]


def _htm(letter: str, turns: int) -> int:
    if letter in ROTATION_LETTERS:
        return 0
    return 2 if letter in SLICE_LETTERS else 1


def _qtm(letter: str, turns: int) -> int:
    return _htm(letter, turns) * (2 if turns == 2 else 1)


def _stm(letter: str, turns: int) -> int:
    return 0 if letter in ROTATION_LETTERS else 1


def _etm(letter: str, turns: int) -> int:
    return 1


# 步数统计方式
METRICS: Dict[str, Callable[[str, int], int]] = {
    'HTM': _htm,
    'QTM': _qtm,
    'STM': _stm,
    'ETM': _etm,
}


def count_moves(moves: Sequence[str], metric: str = 'HTM') -> int:
    if metric not in METRICS:
        raise ValueError(f"Unrecognized metric: '{metric}'")
    weight = METRICS[metric]
    return sum(weight(*parse_move(m)) for m in moves)
