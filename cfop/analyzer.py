from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .core import config
from .cube_state import CubeState
from .core.classifier import AnalysisSession, current_step_number
from .core.cube import Cube
from .core.moves import count_moves, string_to_moves
from .core.naming import get_step_name


@dataclass
class Step:
    name: Optional[str]
    moves: List[str]
    start_level: int
    end_level: int
    move_count: int = 0


@dataclass
class Analysis:
    steps: List[Step] = field(default_factory=list)
    total_move_count: int = 0
    start_level: int = 0
    final_level: int = 0
    levels: List[int] = field(default_factory=list)


class CfopAnalyzer:
    """Splits a solution into CFOP steps by replaying it on one cube.

    An analyzer owns a single AnalysisSession; create a new analyzer for
    every solution, otherwise the remembered last-layer center leaks into
    the next analysis.
    """

    def __init__(self, cube: Cube, session: Optional[AnalysisSession] = None,
                 metric: str = config.DEFAULT_METRIC, trace: bool = config.SHOW_DEBUG_INFO):
        self.cube = cube
        self.session = session if session is not None else AnalysisSession()
        self.metric = metric
        self.trace = trace

    def current_step_number(self) -> int:
        return current_step_number(self.cube, self.session)

    def _close(self, moves: List[str], start: int, end: int, name: Optional[str]) -> Step:
        return Step(name=name, moves=moves, start_level=start, end_level=end,
                    move_count=count_moves(moves, self.metric))

    def analyze(self, solution: Union[str, Sequence[str]]) -> Analysis:
        moves = string_to_moves(solution) if isinstance(solution, str) else list(solution)
        analysis = Analysis(total_move_count=count_moves(moves, self.metric))

        step_start = self.current_step_number()
        analysis.start_level = step_start
        level = step_start
        pending: List[str] = []

        for move in moves:
            self.cube.apply_moves([move])
            pending.append(move)
            level = self.current_step_number()
            analysis.levels.append(level)
            if self.trace:
                print(f"  {move:<4} -> {level}")
            if level > step_start:
                analysis.steps.append(self._close(pending, step_start, level,
                                                  get_step_name(step_start, level)))
                pending = []
                step_start = level

        if pending:
            analysis.steps.append(self._close(pending, step_start, level, None))

        analysis.final_level = level
        return analysis


def analyze_solution(scramble: Union[str, Sequence[str]], solution: Union[str, Sequence[str]],
                     metric: str = config.DEFAULT_METRIC, setup_state: Optional[str] = None,
                     trace: bool = config.SHOW_DEBUG_INFO) -> Analysis:
    """Replay `solution` after `scramble` (or from a facelet `setup_state`) and group it into steps."""
    state = CubeState()
    if setup_state is not None and not state.load_facelets(setup_state):
        raise ValueError(f"Invalid facelet state: {setup_state}")
    if scramble:
        state.apply_scramble(scramble)
    return CfopAnalyzer(state.cube, AnalysisSession(), metric=metric, trace=trace).analyze(solution)
