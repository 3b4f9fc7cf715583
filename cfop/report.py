"""
输出模块：复盘文本 / TPS / alg.cubing.net 动画链接
"""
from typing import Dict, List, Optional, Sequence
from urllib.parse import urlencode

from .core import config
from .core.moves import METRICS, count_moves, moves_to_string


def step_label(step, unknown_name: str = config.UNKNOWN_STEP_NAME) -> str:
    return step.name if step.name is not None else unknown_name


def format_solution(steps: Sequence, unknown_name: str = config.UNKNOWN_STEP_NAME) -> str:
    """每个阶段一行: "<moves> // <name>" """
    return '\n'.join(
        f"{moves_to_string(step.moves)} // {step_label(step, unknown_name)}" for step in steps
    )


def reconstruction_text(scramble: Sequence[str], formatted_solution: str,
                        time: Optional[float] = None) -> str:
    text = f"Scramble: {moves_to_string(scramble)}\n\n{formatted_solution}"
    if time:
        text = f"Time: {time}\n{text}"
    return text


def calculate_tps(move_count: int, time: Optional[float]) -> Optional[float]:
    if not time:
        return None
    return round(move_count / time, config.TPS_DECIMALS)


def animation_url(scramble: Sequence[str], formatted_solution: str) -> str:
    params = {
        'setup': moves_to_string(scramble),
        'alg': formatted_solution,
        'title': 'Reconstruction',
        'type': 'reconstruction',
    }
    return f"{config.ALG_CUBING_URL}?{urlencode(params)}"


def metric_summary(moves: Sequence[str], time: Optional[float] = None) -> Dict[str, Dict]:
    """各统计方式下的步数和 TPS"""
    summary = {}
    for metric in METRICS:
        count = count_moves(moves, metric)
        summary[metric] = {'moves': count, 'tps': calculate_tps(count, time)}
    return summary


def step_table(steps: Sequence, time_per_step: Optional[List[float]] = None,
               unknown_name: str = config.UNKNOWN_STEP_NAME) -> List[Dict]:
    rows = []
    for k, step in enumerate(steps):
        elapsed = time_per_step[k] if time_per_step and k < len(time_per_step) else None
        rows.append({
            'name': step_label(step, unknown_name),
            'moves': moves_to_string(step.moves),
            'count': step.move_count,
            'tps': calculate_tps(step.move_count, elapsed),
        })
    return rows
