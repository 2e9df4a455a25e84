from __future__ import annotations

import numpy as np
import pytest

from moead.exceptions import BoundsError
from moead.variation import GaussianMutation, UniformCrossover, VariationOperator, resolve_bounds


def test_uniform_crossover_mixes_parent_genes():
    rng = np.random.default_rng(0)
    a = np.zeros(50)
    b = np.ones(50)
    child = UniformCrossover(0.5)(a, b, rng)
    assert set(np.unique(child).tolist()) <= {0.0, 1.0}
    assert 0 < child.sum() < 50


def test_uniform_crossover_extreme_probabilities():
    rng = np.random.default_rng(1)
    a = np.arange(5.0)
    b = -np.arange(5.0)
    assert np.array_equal(UniformCrossover(1.0)(a, b, rng), a)
    assert np.array_equal(UniformCrossover(0.0)(a, b, rng), b)


def test_uniform_crossover_is_reproducible():
    a = np.zeros(10)
    b = np.ones(10)
    c1 = UniformCrossover(0.6)(a, b, np.random.default_rng(5))
    c2 = UniformCrossover(0.6)(a, b, np.random.default_rng(5))
    assert np.array_equal(c1, c2)


def test_gaussian_mutation_respects_bounds():
    rng = np.random.default_rng(2)
    lower = np.full(4, -1.0)
    upper = np.full(4, 1.0)
    mut = GaussianMutation(1.0, 10.0, lower=lower, upper=upper)
    for _ in range(50):
        y = mut(np.zeros(4), rng)
        assert np.all(y >= lower) and np.all(y <= upper)


def test_gaussian_mutation_zero_probability_is_identity():
    rng = np.random.default_rng(3)
    mut = GaussianMutation(0.0, 1.0, lower=np.zeros(3), upper=np.ones(3))
    x = np.array([0.1, 0.5, 0.9])
    y = mut(x, rng)
    assert np.array_equal(x, y)
    assert y is not x


def test_gaussian_mutation_does_not_modify_input():
    rng = np.random.default_rng(4)
    mut = GaussianMutation(1.0, 0.1, lower=np.zeros(2), upper=np.ones(2))
    x = np.array([0.5, 0.5])
    mut(x, rng)
    assert np.array_equal(x, [0.5, 0.5])


def test_variation_operator_children_stay_in_bounds():
    rng = np.random.default_rng(6)
    lower, upper = resolve_bounds(-1.0, 2.0, 3)
    op = VariationOperator.build(0.6, 0.5, 5.0, lower, upper)
    for _ in range(50):
        child = op(rng.uniform(lower, upper), rng.uniform(lower, upper), rng)
        assert child.shape == (3,)
        assert np.all(child >= lower) and np.all(child <= upper)


def test_resolve_bounds_broadcasts_scalars():
    lower, upper = resolve_bounds([-2.0], 3.0, 4)
    assert np.array_equal(lower, np.full(4, -2.0))
    assert np.array_equal(upper, np.full(4, 3.0))


def test_resolve_bounds_rejects_bad_shapes():
    with pytest.raises(BoundsError):
        resolve_bounds([0.0, 0.0], [1.0, 1.0], 3)
    with pytest.raises(BoundsError):
        resolve_bounds(2.0, 1.0, 1)
