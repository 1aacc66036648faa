import os
from typing import Dict, List, Optional

import matplotlib.pyplot as plt

from .solver import Solution


def format_solution(
    solution: Solution, time_decimals: int = 1, value_decimals: int = 3
) -> List[Dict[str, float]]:
    """
    Rounds a solution for display in labels and tooltips.

    :param solution: Full-precision solver output
    :param time_decimals: Decimal places kept for time
    :param value_decimals: Decimal places kept for the fractions
    :return: One dict per sample point with keys time, susceptible, infected, recovered
    """
    return [
        {
            "time": round(point.time, time_decimals),
            "susceptible": round(point.susceptible, value_decimals),
            "infected": round(point.infected, value_decimals),
            "recovered": round(point.recovered, value_decimals),
        }
        for point in solution
    ]


def format_table(solution: Solution, every: int = 1) -> str:
    """
    Renders a solution as a fixed-width text table with summary statistics.

    :param solution: Solver output
    :param every: Print every n-th sample point (the last point is always printed)
    :return: Table as a single string
    """
    lines = []
    header = f"{'Day':<10} {'S':<12} {'I':<12} {'R':<12}"
    lines.append(header)
    lines.append("-" * len(header))

    last = len(solution) - 1
    for idx, point in enumerate(solution):
        if idx % every != 0 and idx != last:
            continue
        lines.append(
            f"{point.time:<10.1f} {point.susceptible:<12.3f} "
            f"{point.infected:<12.3f} {point.recovered:<12.3f}"
        )

    final = solution.final_point
    lines.append("=" * len(header))
    lines.append(f"Peak Infected: {solution.peak_infected:.3f} (day {solution.peak_day:.1f})")
    lines.append(
        f"Final S/I/R: {final.susceptible:.3f} / {final.infected:.3f} / {final.recovered:.3f}"
    )
    return "\n".join(lines)


def _plot_sirs_curves(ax, solution: Solution, title: Optional[str] = None) -> None:
    """
    Helper function to plot SIRS curves on a given axes.
    """
    colors = {"S": "blue", "I": "red", "R": "green"}

    ax.plot(solution.t, solution.S, color=colors["S"], label="Susceptible (S)", linewidth=2)
    ax.plot(solution.t, solution.I, color=colors["I"], label="Infected (I)", linewidth=2)
    ax.plot(solution.t, solution.R, color=colors["R"], label="Recovered (R)", linewidth=2)

    if title:
        ax.set_title(title, fontsize=12, fontweight="bold")

    ax.set_xlabel("Time (days)")
    ax.set_ylabel("Fraction of population")
    ax.set_ylim(0, 1)
    ax.legend()
    ax.grid(True, alpha=0.3)

    info_text = f"Peak I: {solution.peak_infected:.3f}\n"
    info_text += f"Peak day: {solution.peak_day:.1f}"

    ax.text(
        0.98,
        0.98,
        info_text,
        transform=ax.transAxes,
        ha="right",
        va="top",
        bbox=dict(boxstyle="round", facecolor="wheat", alpha=0.5),
        fontsize=9,
    )


def plot_solution(
    solution: Solution, title: Optional[str] = None, save_path: Optional[str] = None
) -> None:
    """
    Creates a plot of the S, I and R fractions over time.

    :param solution: Solver output to visualize
    :param title: Optional custom title
    :param save_path: Optional path to save the plot. If None, displays the plot.
    """
    if title is None:
        title = "SIRS Epidemic Model"

    fig, ax = plt.subplots(figsize=(10, 6))
    _plot_sirs_curves(ax, solution, title)

    if save_path:
        directory = os.path.dirname(save_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        plt.savefig(save_path, dpi=300, bbox_inches="tight")
        plt.close(fig)
    else:
        plt.show()
        plt.close(fig)
