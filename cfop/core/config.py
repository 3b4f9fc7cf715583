"""
配置文件：分析与输出的默认参数
"""

# 步数统计方式
# 选项：
# - "HTM" (半圈计一步，中层两步，整体转动不计)
# - "QTM" (90°计一步)
# - "STM" (任意层转动计一步)
# - "ETM" (所有记号都计一步)
DEFAULT_METRIC = "HTM"

# 没有推进进度的尾段名称
UNKNOWN_STEP_NAME = "unknown"

# TPS 保留小数位
TPS_DECIMALS = 2

# 动画链接
ALG_CUBING_URL = "https://alg.cubing.net/"

# 显示配置
SHOW_DEBUG_INFO = False
