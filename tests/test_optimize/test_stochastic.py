import numpy as np
import pytest

from gradkit.optimize import (
    GDConfig,
    InvalidParameter,
    MiniBatchConfig,
    SGDConfig,
    batch_gradient_descent,
    minibatch_gradient_descent,
    stochastic_gradient_descent,
)


def identity(indices: np.ndarray) -> np.ndarray:
    return indices


def test_sgd_converges(line_data, rng):
    X, y = line_data
    res = stochastic_gradient_descent(X, y, SGDConfig(learning_rate=0.01, epochs=100), rng=rng)
    assert abs(res.theta[0] - 1) < 0.5
    assert abs(res.theta[1] - 2) < 0.5
    assert res.final_cost < res.costs[0]


def test_sgd_records_one_cost_per_epoch(line_data, rng):
    X, y = line_data
    res = stochastic_gradient_descent(
        X, y, SGDConfig(learning_rate=0.01, epochs=10, tolerance=0.0), rng=rng
    )
    assert len(res.costs) == 10
    assert res.iterations_performed == 10
    assert res.n_updates == 10 * X.shape[0]


def test_sgd_stops_on_epoch_tolerance(line_data, rng):
    X, y = line_data
    res = stochastic_gradient_descent(
        X, y, SGDConfig(learning_rate=0.05, epochs=5000, tolerance=1e-6), rng=rng
    )
    assert res.converged
    assert res.iterations_performed < 5000
    assert abs(res.costs[-1] - res.costs[-2]) < 1e-6
    assert res.n_updates == res.iterations_performed * X.shape[0]


def test_sgd_seeded_runs_repeat(line_data):
    X, y = line_data
    cfg = SGDConfig(learning_rate=0.01, epochs=20)
    res1 = stochastic_gradient_descent(X, y, cfg, rng=42)
    res2 = stochastic_gradient_descent(X, y, cfg, rng=np.random.default_rng(42))
    assert np.array_equal(res1.theta, res2.theta)


def test_sgd_single_sample_update_rule(line_data):
    X, y = line_data
    lr = 0.01
    res = stochastic_gradient_descent(
        X, y, SGDConfig(learning_rate=lr, epochs=1), permute=identity
    )
    theta = np.zeros(2)
    for row, target in zip(X, y):
        theta = theta - lr * (row @ theta - target) * row
    assert np.allclose(res.theta, theta)


def test_sgd_permutation_called_once_per_epoch(line_data):
    X, y = line_data
    calls = []

    def recording(indices: np.ndarray) -> np.ndarray:
        calls.append(indices.copy())
        return indices[::-1]

    stochastic_gradient_descent(
        X, y, SGDConfig(learning_rate=0.01, epochs=4, tolerance=0.0), permute=recording
    )
    assert len(calls) == 4
    assert all(np.array_equal(c, np.arange(5)) for c in calls)


def test_sgd_rejects_bad_epochs(line_data):
    X, y = line_data
    with pytest.raises(InvalidParameter):
        stochastic_gradient_descent(X, y, {"learningRate": 0.01, "epochs": 0})


def test_minibatch_converges(line_data, rng):
    X, y = line_data
    res = minibatch_gradient_descent(
        X, y, MiniBatchConfig(learning_rate=0.01, iterations=100, batch_size=2), rng=rng
    )
    assert abs(res.theta[0] - 1) < 0.5
    assert abs(res.theta[1] - 2) < 0.5


@pytest.mark.parametrize("batch_size, updates_per_pass", [(1, 5), (2, 3), (5, 1), (8, 1)])
def test_minibatch_partition_counts(line_data, rng, batch_size, updates_per_pass):
    X, y = line_data
    res = minibatch_gradient_descent(
        X,
        y,
        MiniBatchConfig(learning_rate=0.01, iterations=7, batch_size=batch_size, tolerance=0.0),
        rng=rng,
    )
    assert res.iterations_performed == 7
    assert res.n_updates == 7 * updates_per_pass


def test_minibatch_any_batch_size_reduces_cost(line_data, rng):
    X, y = line_data
    for batch_size in (1, 5):
        res = minibatch_gradient_descent(
            X, y, MiniBatchConfig(learning_rate=0.01, iterations=100, batch_size=batch_size), rng=rng
        )
        assert res.final_cost < res.costs[0]


def test_minibatch_full_batch_matches_batch_descent(line_data):
    X, y = line_data
    passes = 40
    mini = minibatch_gradient_descent(
        X,
        y,
        MiniBatchConfig(learning_rate=0.01, iterations=passes, batch_size=5, tolerance=0.0),
        permute=identity,
    )
    full_same_updates = batch_gradient_descent(
        X, y, GDConfig(learning_rate=0.01, iterations=passes, tolerance=0.0)
    )
    full_one_more = batch_gradient_descent(
        X, y, GDConfig(learning_rate=0.01, iterations=passes + 1, tolerance=0.0)
    )
    assert np.allclose(mini.theta, full_same_updates.theta, rtol=1e-12, atol=1e-12)
    # mini-batch records the cost after each pass, batch descent before each update
    assert np.allclose(mini.costs, full_one_more.costs[1:], rtol=1e-12, atol=1e-12)


def test_minibatch_shuffles_with_rng(line_data):
    X, y = line_data
    cfg = MiniBatchConfig(learning_rate=0.01, iterations=5, batch_size=2, tolerance=0.0)
    a = minibatch_gradient_descent(X, y, cfg, rng=1)
    b = minibatch_gradient_descent(X, y, cfg, rng=1)
    c = minibatch_gradient_descent(X, y, cfg, permute=identity)
    assert np.array_equal(a.theta, b.theta)
    assert not np.array_equal(a.theta, c.theta)


def test_minibatch_rejects_bad_batch_size(line_data):
    X, y = line_data
    with pytest.raises(InvalidParameter):
        minibatch_gradient_descent(
            X, y, MiniBatchConfig(learning_rate=0.01, iterations=5, batch_size=0)
        )
