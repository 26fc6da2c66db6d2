import numpy as np
import pytest

from mnistnet.activations import (
    cross_entropy,
    relu,
    relu_derivative,
    sigmoid,
    sigmoid_derivative,
    softmax,
)


@pytest.fixture
def sample():
    return np.array([[-3.0, -0.5, 0.0, 0.5, 4.0], [10.0, -10.0, 2.0, 2.0, 1.0]])


def test_softmax_rows_sum_to_one(sample):
    result = softmax(sample)
    assert result.shape == sample.shape
    np.testing.assert_allclose(result.sum(axis=1), np.ones(2))
    assert np.all(result > 0)


def test_softmax_preserves_order(sample):
    result = softmax(sample)
    np.testing.assert_array_equal(np.argsort(result, axis=1, kind="stable"),
                                  np.argsort(sample, axis=1, kind="stable"))


def test_softmax_shift_invariant(sample):
    np.testing.assert_allclose(softmax(sample), softmax(sample + 1000.0))


def test_softmax_huge_values_do_not_overflow():
    result = softmax([[1e308, 1e308]])
    np.testing.assert_allclose(result, [[0.5, 0.5]])


def test_cross_entropy_uniform_prediction():
    target = np.array([[0.0, 0.0, 1.0, 0.0]])
    predicted = np.full((1, 4), 0.25)
    assert cross_entropy(target, predicted) == pytest.approx(np.log(4))


def test_cross_entropy_perfect_prediction_is_zero():
    target = np.array([[0.0, 1.0]])
    predicted = np.array([[1e-9, 1.0]])
    assert cross_entropy(target, predicted) == pytest.approx(0.0)


def test_cross_entropy_non_negative_for_probabilities(sample):
    target = np.zeros_like(sample)
    target[:, 1] = 1.0
    assert cross_entropy(target, softmax(sample)) > 0


def test_sigmoid_matches_tanh_identity(sample):
    np.testing.assert_allclose(sigmoid(sample), (1 + np.tanh(sample / 2)) / 2)


def test_sigmoid_symmetry(sample):
    np.testing.assert_allclose(sigmoid(sample) + sigmoid(-sample), np.ones_like(sample))


def test_sigmoid_extremes_are_finite():
    result = sigmoid([[-1000.0, 1000.0]])
    assert np.all(np.isfinite(result))
    assert result[0, 0] == pytest.approx(0.0)
    assert result[0, 1] == pytest.approx(1.0)


def test_sigmoid_derivative_peak_at_zero():
    assert sigmoid_derivative([[0.0]])[0, 0] == pytest.approx(0.25)


def test_sigmoid_derivative_bounded_and_symmetric(sample):
    result = sigmoid_derivative(sample)
    assert np.all(result <= 0.25)
    assert np.all(result >= 0)
    np.testing.assert_allclose(result, sigmoid_derivative(-sample))


def test_sigmoid_derivative_consistent_with_sigmoid(sample):
    s = sigmoid(sample)
    np.testing.assert_allclose(sigmoid_derivative(sample), s * (1 - s))


def test_relu_clears_negatives(sample):
    result = relu(sample)
    assert np.all(result >= 0)
    positive = sample > 0
    np.testing.assert_array_equal(result[positive], sample[positive])
    assert np.all(result[~positive] == 0)


def test_relu_does_not_mutate_input(sample):
    original = sample.copy()
    relu(sample)
    np.testing.assert_array_equal(sample, original)


def test_relu_derivative_is_indicator(sample):
    result = relu_derivative(sample)
    np.testing.assert_array_equal(result, (sample > 0).astype(float))
    assert set(np.unique(result)) <= {0.0, 1.0}