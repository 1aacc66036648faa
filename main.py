import argparse
import sys

from sirs.config import get_config
from sirs.scenarios import get_scenario, get_scenario_description, list_scenarios
from sirs.solver import solve_sirs
from sirs.utils import format_table, plot_solution


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve the SIRS epidemic model")
    parser.add_argument(
        "--scenario",
        type=str,
        default="default",
        choices=list_scenarios(),
        help="Predefined parameter set to start from",
    )
    parser.add_argument("--r0", type=float, help="Basic reproduction number")
    parser.add_argument("--gamma", type=float, help="Recovery rate (per day)")
    parser.add_argument(
        "--immunity-duration", type=float, help="Mean immunity duration (days)"
    )
    parser.add_argument("--duration", type=int, help="Days to simulate")
    parser.add_argument(
        "--config",
        type=str,
        default="default",
        help="Which solver configuration to use (default, coarse, fine)",
    )
    parser.add_argument(
        "--every", type=int, default=7, help="Print every n-th day in the table"
    )
    parser.add_argument("--plot", action="store_true", help="Plot the solution")
    parser.add_argument(
        "--save-path", type=str, default=None, help="Save the plot instead of showing it"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    params = get_scenario(args.scenario)
    overrides = {
        "r0": args.r0,
        "gamma": args.gamma,
        "immunity_duration": args.immunity_duration,
        "duration": args.duration,
    }
    params.update({k: v for k, v in overrides.items() if v is not None})

    try:
        config = get_config(args.config)
        solution = solve_sirs(config=config, **params)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Scenario: {args.scenario} ({get_scenario_description(args.scenario)})")
    print(
        f"R0={params['r0']}, gamma={params['gamma']}, "
        f"immunity={params['immunity_duration']} days, duration={params['duration']} days"
    )
    print(format_table(solution, every=max(args.every, 1)))

    if args.plot or args.save_path:
        plot_solution(solution, save_path=args.save_path)
        if args.save_path:
            print(f"Plot saved to {args.save_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
