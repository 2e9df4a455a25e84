from __future__ import annotations

import numpy as np
import pytest

from moead.exceptions import ConfigurationError, NeighbourhoodSizeError
from moead.weights import WeightVectorSet, compute_neighbors, generate_weight_vectors, load_weight_vectors


@pytest.mark.parametrize("pop_size,n_obj", [(2, 2), (10, 2), (15, 3), (20, 3), (35, 4), (7, 1)])
def test_weights_lie_on_simplex(pop_size, n_obj):
    weights = generate_weight_vectors(pop_size, n_obj, rng=np.random.default_rng(0))
    assert weights.shape == (pop_size, n_obj)
    assert np.all(weights >= 0.0)
    assert np.allclose(weights.sum(axis=1), 1.0)


def test_two_objective_weights_are_uniformly_spaced():
    weights = generate_weight_vectors(5, 2)
    expected = np.array([[0.0, 1.0], [0.25, 0.75], [0.5, 0.5], [0.75, 0.25], [1.0, 0.0]])
    assert np.allclose(weights, expected)


def test_many_objective_weights_are_distinct_and_reproducible():
    w1 = generate_weight_vectors(20, 3, rng=np.random.default_rng(42))
    w2 = generate_weight_vectors(20, 3, rng=np.random.default_rng(42))
    assert np.array_equal(w1, w2)
    assert np.unique(w1, axis=0).shape[0] == 20
    # Simplex corners are always present.
    for k in range(3):
        corner = np.zeros(3)
        corner[k] = 1.0
        assert np.any(np.all(np.isclose(w1, corner), axis=1))


def test_exact_lattice_is_returned_whole():
    # C(4 + 2, 2) = 15 lattice points for 3 objectives and 4 divisions.
    weights = generate_weight_vectors(15, 3)
    assert weights.shape == (15, 3)
    assert np.unique(weights, axis=0).shape[0] == 15


@pytest.mark.parametrize("pop_size,n_obj,t", [(10, 2, 3), (10, 2, 10), (21, 3, 5), (6, 1, 4)])
def test_neighborhoods_contain_self_without_duplicates(pop_size, n_obj, t):
    weights = generate_weight_vectors(pop_size, n_obj, rng=np.random.default_rng(1))
    neighbors = compute_neighbors(weights, t)
    assert neighbors.shape == (pop_size, t)
    for i, row in enumerate(neighbors):
        assert row[0] == i
        assert len(set(row.tolist())) == t


def test_neighborhoods_are_nearest_weights():
    weights = generate_weight_vectors(6, 2)
    neighbors = compute_neighbors(weights, 3)
    assert neighbors[0].tolist() == [0, 1, 2]
    assert neighbors[2][0] == 2
    assert set(neighbors[2].tolist()) == {1, 2, 3}
    assert neighbors[5].tolist() == [5, 4, 3]


def test_equal_distances_are_ordered_by_index():
    weights = generate_weight_vectors(6, 1)
    neighbors = compute_neighbors(weights, 4)
    assert neighbors[0].tolist() == [0, 1, 2, 3]
    assert neighbors[3].tolist() == [3, 0, 1, 2]


def test_neighborhood_larger_than_population_fails():
    weights = generate_weight_vectors(10, 2)
    with pytest.raises(NeighbourhoodSizeError):
        compute_neighbors(weights, 15)
    with pytest.raises(NeighbourhoodSizeError):
        WeightVectorSet.build(10, 2, 15)


def test_weight_vector_set_is_read_only():
    ws = WeightVectorSet.build(8, 2, 3)
    assert ws.size == 8
    with pytest.raises(ValueError):
        ws.weights[0, 0] = 0.3
    with pytest.raises(ValueError):
        ws.neighbors[0, 0] = 4


def test_load_weight_vectors_from_csv(tmp_path):
    path = tmp_path / "weights.csv"
    np.savetxt(path, generate_weight_vectors(6, 2), delimiter=",")
    weights = load_weight_vectors(path, 4, 2)
    assert weights.shape == (4, 2)
    ws = WeightVectorSet.build(4, 2, 2, path=path)
    assert np.allclose(ws.weights, weights)


def test_load_weight_vectors_rejects_bad_files(tmp_path):
    path = tmp_path / "weights.csv"
    np.savetxt(path, np.array([[0.2, 0.2], [0.5, 0.5]]), delimiter=",")
    with pytest.raises(ConfigurationError, match="sum to 1"):
        load_weight_vectors(path, 2, 2)

    np.savetxt(path, np.array([[0.5, 0.5], [1.0, 0.0]]), delimiter=",")
    with pytest.raises(ConfigurationError, match="requires at least"):
        load_weight_vectors(path, 3, 2)
    with pytest.raises(ConfigurationError, match="columns"):
        load_weight_vectors(path, 2, 3)
    with pytest.raises(ConfigurationError, match="does not exist"):
        load_weight_vectors(tmp_path / "missing.csv", 2, 2)
