"""
阶段命名模块：(起始等级, 结束等级) -> CFOP 术语
"""
from typing import Optional

PAIRS = ['1st', '2nd', '3rd', '4th']

# 顶层阶段；结束等级 >= 9 时按 9 查表（AUF 除外）
LL_STEP_NAMES = {
    (4, 7): 'OLS',
    (5, 6): 'EOLL',
    (5, 7): 'OLL',
    (5, 8): 'OLLCP',
    (5, 9): '1LLL',
    (6, 7): 'OCLL',
    (6, 8): 'COLL',
    (6, 9): 'ZBLL',
    (7, 8): 'CPLL',
    (7, 9): 'PLL',
    (8, 9): 'EPLL',
    (9, 10): 'AUF',
}


def get_step_name(step_before: int, step: int) -> Optional[str]:
    """
    例: (0, 1) -> 'cross', (0, 3) -> 'xxcross', (1, 3) -> '1st + 2nd pair',
        (5, 7) -> 'OLL', (9, 10) -> 'AUF'
    进度没有增加或组合不在表中时返回 None
    """
    if step <= step_before:
        return None

    if step_before == 0 and step <= 5:
        return 'x' * (step - 1) + 'cross'

    key = (step_before, step) if step_before == 9 else (step_before, min(step, 9))
    if key in LL_STEP_NAMES:
        return LL_STEP_NAMES[key]

    if 0 < step_before <= 4:
        name = ' + '.join(PAIRS[step_before - 1:step - 1]) + ' pair'
        if step == 6:
            name += ' / EOLS'
        if step >= 7:
            name += ' / OLS'
        return name
    return None
