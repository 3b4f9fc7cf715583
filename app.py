"""
主程序：CFOP 复盘分析
打乱 → 逐步回放解法 → 进度分级 → 阶段命名 → 复盘文本
"""
import argparse
import os
from typing import Optional

import yaml

from cfop.analyzer import analyze_solution
from cfop.core import config
from cfop.core.moves import string_to_moves
from cfop.report import (
    animation_url,
    format_solution,
    metric_summary,
    reconstruction_text,
    step_table,
)


def load_config(path: str = "config.yaml") -> dict:
    if not os.path.exists(path):
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


class App:
    def __init__(self, scramble: str, solution: str, time: Optional[float] = None,
                 state: Optional[str] = None, config_path: str = "config.yaml"):
        self.cfg = load_config(config_path)
        report_cfg = self.cfg.get('report', {}) or {}
        debug_cfg = self.cfg.get('debug', {}) or {}

        self.metric = str(self.cfg.get('metric') or config.DEFAULT_METRIC)
        self.unknown_name = str(report_cfg.get('unknown_step_name', config.UNKNOWN_STEP_NAME))
        self.show_tps = bool(report_cfg.get('show_tps', True))
        self.show_link = bool(report_cfg.get('show_link', True))
        self.trace = bool(debug_cfg.get('trace_levels', config.SHOW_DEBUG_INFO))

        self.scramble = string_to_moves(scramble)
        self.solution = string_to_moves(solution)
        self.time = float(time) if time else None
        self.state = state

    def run(self):
        print("=" * 60)
        print("CFOP Reconstruction")
        print("=" * 60)

        analysis = analyze_solution(self.scramble, self.solution, metric=self.metric,
                                    setup_state=self.state, trace=self.trace)
        formatted = format_solution(analysis.steps, self.unknown_name)

        print(reconstruction_text(self.scramble, formatted, self.time))
        print()
        for row in step_table(analysis.steps, unknown_name=self.unknown_name):
            print(f"  {row['name']:<24} {row['count']:>3} {self.metric}")
        print(f"共 {analysis.total_move_count} 步 ({self.metric})，最终进度 {analysis.final_level}/10")

        if self.show_tps and self.time:
            for metric, info in metric_summary(self.solution, self.time).items():
                print(f"  {metric}: {info['moves']} moves, {info['tps']} tps")

        if self.show_link:
            print(f"\n🔗 {animation_url(self.scramble, formatted)}")
        return analysis


def main():
    parser = argparse.ArgumentParser(description="CFOP solve reconstruction")
    parser.add_argument("--scramble", default="", help="scramble applied to a solved cube")
    parser.add_argument("--solution", required=True, help="solution moves")
    parser.add_argument("--time", type=float, default=None, help="solve time in seconds")
    parser.add_argument("--state", default=None, help="54-character URFDLB facelet string to start from")
    parser.add_argument("--config", default="config.yaml")
    args = parser.parse_args()
    try:
        App(args.scramble, args.solution, time=args.time, state=args.state,
            config_path=args.config).run()
    except KeyboardInterrupt:
        print("\n用户中断")
    except Exception as e:
        print(f"错误: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
