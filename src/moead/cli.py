from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import Any

import numpy as np

from .algorithm import MOEAD
from .config import MOEADConfigData, load_config
from .exceptions import MOEADError
from .io_utils import write_config, write_front
from .logging import configure_moead_logging
from .problems import BenchmarkProblem, available_problem_names, get_problem
from .version import get_version


def _parse_probability_arg(parser: argparse.ArgumentParser, flag: str, raw: Any) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        parser.error(f"{flag} must be a float in [0, 1].")
    if not 0.0 <= value <= 1.0:
        parser.error(f"{flag} must be within [0, 1].")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moead-run",
        description="Run MOEA/D on a benchmark problem and print the resulting front.",
    )
    parser.add_argument("--problem", default="schaffer_n1", choices=available_problem_names())
    parser.add_argument("--config", help="YAML or JSON file with MOEA/D settings.")
    parser.add_argument("--pop-size", dest="population_size", type=int)
    parser.add_argument("--neighbourhood-size", dest="neighbourhood_size", type=int)
    parser.add_argument("--generations", dest="max_generations", type=int)
    parser.add_argument("--crossover-prob", dest="crossover_prob")
    parser.add_argument("--mutation-prob", dest="mutation_prob")
    parser.add_argument("--mutation-strength", dest="mutation_strength", type=float)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--output", help="Directory for FUN.csv / X.csv.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every generation.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser


def _resolve_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace, problem: BenchmarkProblem
) -> MOEADConfigData:
    """Problem bounds, then the config file, then command-line flags."""
    cfg = MOEADConfigData(lower_bound=problem.lower, upper_bound=problem.upper)
    if args.config:
        cfg = load_config(args.config, base=cfg)
    args.crossover_prob = _parse_probability_arg(parser, "--crossover-prob", args.crossover_prob)
    args.mutation_prob = _parse_probability_arg(parser, "--mutation-prob", args.mutation_prob)
    overrides = {
        name: getattr(args, name)
        for name in (
            "population_size",
            "neighbourhood_size",
            "max_generations",
            "crossover_prob",
            "mutation_prob",
            "mutation_strength",
            "seed",
        )
        if getattr(args, name) is not None
    }
    return replace(cfg, **overrides) if overrides else cfg


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_moead_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    problem = get_problem(args.problem)
    try:
        cfg = _resolve_config(parser, args, problem)
        optimizer = MOEAD(cfg)
        value = optimizer.optimize(problem.objectives, problem.initial_point)
    except (MOEADError, FileNotFoundError) as exc:
        logging.getLogger(__name__).error("%s", exc)
        return 1

    front = optimizer.front_snapshot()
    order = np.argsort(front.F[:, 0])
    for x, f in zip(front.X[order], front.F[order]):
        print(",".join(f"{v:.6g}" for v in f), "|", ",".join(f"{v:.6g}" for v in x))
    print(f"# front size: {len(front)}, best objective sum: {value:.6g}")

    if args.output:
        write_front(args.output, front)
        write_config(args.output, cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
