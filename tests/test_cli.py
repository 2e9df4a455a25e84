from __future__ import annotations

import json

import numpy as np
import pytest

from moead.cli import build_parser, main

SMALL_RUN = ["--pop-size", "12", "--neighbourhood-size", "4", "--generations", "5", "--seed", "1"]


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.problem == "schaffer_n1"
    assert args.population_size is None
    assert args.output is None


def test_main_prints_front_sorted_by_first_objective(capsys):
    rc = main(["--problem", "two_parabolas", "--mutation-strength", "0.5", *SMALL_RUN])
    assert rc == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out[-1].startswith("# front size:")
    rows = [line for line in out if not line.startswith("#")]
    assert rows
    f1 = [float(line.split("|")[0].split(",")[0]) for line in rows]
    assert f1 == sorted(f1)


def test_main_writes_output_files(tmp_path, capsys):
    out_dir = tmp_path / "run"
    rc = main(["--problem", "fonseca_fleming", "--output", str(out_dir), *SMALL_RUN])
    assert rc == 0
    capsys.readouterr()
    F = np.loadtxt(out_dir / "FUN.csv", delimiter=",", ndmin=2)
    X = np.loadtxt(out_dir / "X.csv", delimiter=",", ndmin=2)
    assert F.shape[0] == X.shape[0]
    assert F.shape[1] == 2
    assert X.shape[1] == 3
    resolved = json.loads((out_dir / "resolved_config.json").read_text(encoding="utf-8"))
    assert resolved["population_size"] == 12
    assert resolved["lower_bound"] == [-4.0]


def test_main_reads_config_file(tmp_path, capsys):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "moead:\n  population_size: 10\n  neighbourhood_size: 3\n  max_generations: 3\n"
        "  lower_bound: -10.0\n  upper_bound: 10.0\n",
        encoding="utf-8",
    )
    rc = main(["--problem", "two_parabolas", "--config", str(path), "--seed", "2"])
    assert rc == 0
    assert "# front size:" in capsys.readouterr().out


def test_main_reports_configuration_errors(capsys):
    rc = main(["--problem", "two_parabolas", "--pop-size", "5", "--neighbourhood-size", "9"])
    assert rc == 1


def test_invalid_probability_is_a_usage_error():
    with pytest.raises(SystemExit):
        main(["--crossover-prob", "1.5"])


def test_config_file_without_bounds_uses_problem_bounds(tmp_path, capsys):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "moead:\n  population_size: 12\n  neighbourhood_size: 4\n  max_generations: 20\n"
        "  mutation_prob: 0.5\n  mutation_strength: 0.5\n",
        encoding="utf-8",
    )
    out_dir = tmp_path / "run"
    rc = main(["--problem", "two_parabolas", "--config", str(path), "--seed", "1", "--output", str(out_dir)])
    assert rc == 0
    capsys.readouterr()
    resolved = json.loads((out_dir / "resolved_config.json").read_text(encoding="utf-8"))
    assert resolved["lower_bound"] == [-10.0]
    assert resolved["upper_bound"] == [10.0]
    assert resolved["population_size"] == 12
    X = np.loadtxt(out_dir / "X.csv", delimiter=",", ndmin=2)
    # Clipping to a degenerate [1, 1] box would leave a single point at x = 1.
    assert X.shape[0] > 1
    assert X.min() < 0.9


def test_config_file_with_bad_value_fails_cleanly(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("moead:\n  population_size: ten\n", encoding="utf-8")
    assert main(["--problem", "two_parabolas", "--config", str(path)]) == 1


def test_missing_config_file_fails_cleanly(tmp_path):
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert capsys.readouterr().out.startswith("moead-run ")
