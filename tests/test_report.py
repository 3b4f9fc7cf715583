from cfop.analyzer import Step, analyze_solution
from cfop.report import (
    animation_url,
    calculate_tps,
    format_solution,
    metric_summary,
    reconstruction_text,
    step_table,
)

STEPS = [
    Step("4th pair / OLS", ["R", "U'"], 4, 9, 2),
    Step("AUF", ["R'"], 9, 10, 1),
]


class TestFormatting:

    def test_format_solution(self):
        assert format_solution(STEPS) == "R U' // 4th pair / OLS\nR' // AUF"

    def test_unknown_step_name(self):
        steps = [Step(None, ["R", "R'"], 9, 9, 2)]
        assert format_solution(steps) == "R R' // unknown"
        assert format_solution(steps, "???") == "R R' // ???"

    def test_reconstruction_text(self):
        text = reconstruction_text(["R", "U", "R'"], format_solution(STEPS))
        assert text == "Scramble: R U R'\n\nR U' // 4th pair / OLS\nR' // AUF"

    def test_reconstruction_text_with_time(self):
        text = reconstruction_text(["U"], "U' // AUF", time=1.5)
        assert text == "Time: 1.5\nScramble: U\n\nU' // AUF"

    def test_from_analysis(self):
        analysis = analyze_solution("R U R'", "R U' R'")
        assert format_solution(analysis.steps) == format_solution(STEPS)


class TestTps:

    def test_rounding(self):
        assert calculate_tps(10, 4) == 2.5
        assert calculate_tps(7, 3) == 2.33

    def test_missing_time(self):
        assert calculate_tps(10, None) is None
        assert calculate_tps(10, 0) is None

    def test_metric_summary(self):
        summary = metric_summary(["R", "U2", "M", "x"], time=2)
        assert set(summary) == {"HTM", "QTM", "STM", "ETM"}
        assert summary["HTM"] == {"moves": 4, "tps": 2.0}
        assert summary["QTM"] == {"moves": 5, "tps": 2.5}
        assert summary["ETM"]["moves"] == 4

    def test_step_table(self):
        rows = step_table(STEPS, time_per_step=[0.8])
        assert rows[0] == {"name": "4th pair / OLS", "moves": "R U'", "count": 2, "tps": 2.5}
        assert rows[1]["tps"] is None


class TestAnimationUrl:

    def test_params(self):
        url = animation_url(["R", "U'"], "R' // AUF")
        assert url.startswith("https://alg.cubing.net/?")
        assert "setup=R+U%27" in url
        assert "alg=R%27+%2F%2F+AUF" in url
        assert "title=Reconstruction" in url
        assert "type=reconstruction" in url
