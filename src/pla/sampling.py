"""Random linearly separable datasets and the label-reproduction check."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import numpy as np

from .perceptron import evaluate, train
from .vector import Example, Scalar, augment

MIN_DIMENSION, MAX_DIMENSION = 1, 10
MIN_SIZE, MAX_SIZE = 1, 100
MAX_SAMPLING_ROUNDS = 1000


def random_separable_dataset(
    rng: np.random.Generator | int | None = None,
    *,
    dimension: Optional[int] = None,
    size: Optional[int] = None,
    margin: float = 0.0,
) -> List[Example]:
    """Sample a dataset that is linearly separable by construction.

    A random target vector ``f`` plays the role of the world: each sampled
    feature vector ``x`` is labeled ``evaluate(augment(f), augment(x))``.
    ``dimension`` and ``size`` default to random picks in ``[1, 10]`` and
    ``[1, 100]``.

    ``margin`` rejects samples whose augmented vector lies closer than that
    distance to the target hyperplane ``augment(f) . x = 0``. The number of
    updates the perceptron needs grows with the inverse square of the smallest
    margin, so a positive value keeps runs short. Margins too large to fill
    the dataset within ``MAX_SAMPLING_ROUNDS`` batches raise ``ValueError``.
    """
    rng = np.random.default_rng(rng)
    n = int(rng.integers(MIN_DIMENSION, MAX_DIMENSION + 1)) if dimension is None else dimension
    m = int(rng.integers(MIN_SIZE, MAX_SIZE + 1)) if size is None else size
    if n < 1:
        raise ValueError(f"dimension must be at least 1, got {n}")
    if m < 0:
        raise ValueError(f"size must be non-negative, got {m}")
    if margin < 0:
        raise ValueError(f"margin must be non-negative, got {margin}")

    target = augment(rng.standard_normal(n).tolist())
    normal = np.asarray(target[1:], dtype=float)
    norm = float(np.linalg.norm(target))

    dataset: List[Example] = []
    rounds = 0
    while len(dataset) < m:
        if rounds == MAX_SAMPLING_ROUNDS:
            raise ValueError(
                f"Only {len(dataset)} of {m} samples cleared margin {margin} "
                f"after {MAX_SAMPLING_ROUNDS} rounds; use a smaller margin"
            )
        rounds += 1
        batch = rng.standard_normal((m - len(dataset), n))
        distances = np.abs(batch @ normal + target[0]) / norm
        for row in batch[distances >= margin].tolist():
            features = tuple(row)
            dataset.append((features, evaluate(target, augment(features))))
    return dataset


def misclassified(
    dataset: Sequence[Example],
    hypothesis: Callable[[Sequence[Scalar]], bool],
) -> List[int]:
    """Indices of the examples ``hypothesis`` labels differently."""
    return [i for i, (features, label) in enumerate(dataset) if hypothesis(features) != bool(label)]


def reproduces_labels(
    dataset: Sequence[Example],
    hypothesis: Optional[Callable[[Sequence[Scalar]], bool]] = None,
) -> bool:
    """True when every training example is classified as its own label.

    Trains on ``dataset`` first when no hypothesis is given.
    """
    if hypothesis is None:
        hypothesis = train(dataset)
    return not misclassified(dataset, hypothesis)
