import matplotlib

matplotlib.use("Agg")

import pytest

from sirs.solver import SamplePoint, Solution, solve_sirs
from sirs.utils import format_solution, format_table, plot_solution


@pytest.fixture
def small_solution() -> Solution:
    return Solution(
        [
            SamplePoint(0.0, 0.999, 0.001, 0.0),
            SamplePoint(0.5, 0.99849, 0.00123456, 0.00027544),
            SamplePoint(1.04, 0.9971234, 0.0015678, 0.0013088),
        ]
    )


class TestFormatSolution:
    """Tests for display rounding."""

    def test_rounds_time_and_values(self, small_solution):
        rows = format_solution(small_solution)
        assert rows[1] == {
            "time": 0.5,
            "susceptible": 0.998,
            "infected": 0.001,
            "recovered": 0.0,
        }
        assert rows[2]["time"] == 1.0
        assert rows[2]["infected"] == 0.002

    def test_custom_precision(self, small_solution):
        rows = format_solution(small_solution, time_decimals=0, value_decimals=5)
        assert rows[1]["infected"] == 0.00123
        assert rows[2]["time"] == 1.0

    def test_does_not_modify_solution(self, small_solution):
        format_solution(small_solution)
        assert small_solution[1].infected == 0.00123456


class TestFormatTable:
    """Tests for the text table."""

    def test_contains_every_row_and_summary(self, small_solution):
        table = format_table(small_solution)
        lines = table.splitlines()
        assert lines[0].split() == ["Day", "S", "I", "R"]
        assert len(lines) == 2 + 3 + 3
        assert "Peak Infected: 0.002 (day 1.0)" in table

    def test_stride_keeps_last_row(self):
        solution = solve_sirs(2.5, 0.2, 180, 10)
        lines = format_table(solution, every=7).splitlines()
        days = [line.split()[0] for line in lines[2:-3]]
        assert days == ["0.0", "7.0", "10.0"]


def test_plot_solution_saves_file(tmp_path, small_solution):
    save_path = tmp_path / "plots" / "sirs.png"
    plot_solution(small_solution, save_path=str(save_path))
    assert save_path.exists()
    assert save_path.stat().st_size > 0
