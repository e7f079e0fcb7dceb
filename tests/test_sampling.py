import numpy as np
import pytest

from pla import misclassified, random_separable_dataset, reproduces_labels, train


@pytest.mark.parametrize("seed", range(40))
def test_training_reproduces_separable_labels(seed):
    dataset = random_separable_dataset(seed, margin=0.1)
    assert 1 <= len(dataset) <= 100
    n = len(dataset[0][0])
    assert 1 <= n <= 10
    assert all(len(x) == n for x, _ in dataset)

    h = train(dataset)
    assert all(h(x) == y for x, y in dataset)


@pytest.mark.parametrize("dimension", [1, 2, 5, 10])
def test_fixed_shape(dimension):
    dataset = random_separable_dataset(dimension, dimension=dimension, size=30, margin=0.1)
    assert len(dataset) == 30
    assert all(len(x) == dimension and isinstance(x, tuple) for x, _ in dataset)
    assert all(isinstance(y, bool) for _, y in dataset)
    assert reproduces_labels(dataset)


def test_same_seed_same_dataset():
    assert random_separable_dataset(7) == random_separable_dataset(7)


def test_accepts_generator():
    rng = np.random.default_rng(3)
    dataset = random_separable_dataset(rng, dimension=3, size=5)
    assert len(dataset) == 5


def test_margin_keeps_samples_away_from_boundary():
    rng = np.random.default_rng(11)
    dataset = random_separable_dataset(rng, dimension=2, size=50, margin=0.3)
    h = train(dataset)
    assert reproduces_labels(dataset, h)


def test_labels_follow_a_hyperplane():
    dataset = random_separable_dataset(5, dimension=4, size=60, margin=0.05)
    h = train(dataset)
    assert misclassified(dataset, h) == []


def test_misclassified_reports_indices():
    dataset = [([1.0], True), ([-1.0], False), ([2.0], False)]
    h = train(dataset[:2])
    assert h((2.0,)) is True
    assert misclassified(dataset, h) == [2]
    assert not reproduces_labels(dataset, h)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        random_separable_dataset(0, dimension=0)
    with pytest.raises(ValueError):
        random_separable_dataset(0, size=-1)
    with pytest.raises(ValueError):
        random_separable_dataset(0, margin=-0.5)


def test_empty_size_allowed():
    assert random_separable_dataset(0, dimension=3, size=0) == []


@pytest.mark.parametrize("seed", range(30))
def test_training_reproduces_labels_without_margin(seed):
    dataset = random_separable_dataset(seed)
    assert reproduces_labels(dataset)


def test_unreachable_margin_raises():
    with pytest.raises(ValueError, match="smaller margin"):
        random_separable_dataset(0, dimension=2, size=5, margin=50.0)
