from __future__ import annotations

import numpy as np
import pytest

from moead.archive import ParetoArchive
from moead.exceptions import ConfigurationError
from moead.io_utils import write_config, write_front
from moead.config import MOEADConfigData
from moead.problems import available_problem_names, fonseca_fleming, get_problem, schaffer_n1


def test_registry_lists_all_problems():
    assert available_problem_names() == ["fonseca_fleming", "schaffer_n1", "two_parabolas"]


def test_get_problem_normalizes_names():
    assert get_problem("Schaffer-N1").name == "schaffer_n1"
    with pytest.raises(ConfigurationError):
        get_problem("zdt1")


def test_schaffer_objectives():
    problem = schaffer_n1()
    f1, f2 = problem.objectives
    assert f1(np.array([1.0])) == 1.0
    assert f2(np.array([1.0])) == 1.0
    assert problem.n_var == 1 and problem.n_obj == 2


def test_fonseca_fleming_pareto_set_endpoints():
    problem = fonseca_fleming(2)
    f1, f2 = problem.objectives
    x = np.full(2, 1.0 / np.sqrt(2))
    assert f1(x) == pytest.approx(0.0)
    assert f2(-x) == pytest.approx(0.0)
    assert problem.initial_point.shape == (2,)


def test_write_front_and_config(tmp_path):
    archive = ParetoArchive()
    archive.update(np.array([0.0]), np.array([0.0, 4.0]))
    archive.update(np.array([2.0]), np.array([4.0, 0.0]))
    artifacts = write_front(tmp_path / "out", archive.snapshot())
    assert artifacts == {"fun": "FUN.csv", "x": "X.csv"}
    F = np.loadtxt(tmp_path / "out" / "FUN.csv", delimiter=",", ndmin=2)
    assert F.shape == (2, 2)
    write_config(tmp_path / "out", MOEADConfigData(seed=4))
    assert (tmp_path / "out" / "resolved_config.json").exists()
