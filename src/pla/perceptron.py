"""Perceptron learning algorithm for binary linear classification.

A binary linear classifier maps a feature vector to a boolean by looking at the
sign of a linear combination of its components. The perceptron learns the
coefficients of that combination from labeled examples: it repeatedly picks the
first misclassified example and nudges the weights towards classifying it
correctly, until no example is misclassified.

If the data is linearly separable the loop terminates with weights that
classify every training example correctly. If it is not, the loop never
terminates unless a ``max_iterations`` cap is given (directly or through
:func:`pla.configure`), in which case :class:`MaxIterationsExceeded` is
raised once the cap is reached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .config import settings
from .errors import DimensionMismatchError, MaxIterationsExceeded
from .vector import Example, Scalar, Vector, add, augment, check_dimensions, dot, scale, zeros

logger = logging.getLogger(__name__)

_Augmented = List[Tuple[Vector, bool]]


def evaluate(weights: Sequence[Scalar], augmented: Sequence[Scalar]) -> bool:
    """Apply ``weights`` to an already augmented feature vector.

    Returns ``True`` when the dot product is ``>= 0``. The comparison is exact;
    a point lying on the hyperplane is classified ``True``.
    """
    return dot(weights, augmented) >= 0


@dataclass(frozen=True)
class Update:
    """One weight correction made by the training loop."""

    step: int
    index: int  # position of the corrected example in the input dataset
    label: bool
    weights: Vector


@dataclass(frozen=True)
class ConstantHypothesis:
    """Classifier that ignores its input.

    Produced for an empty dataset (always ``True``) and for a dataset of
    zero-dimensional feature vectors, where it remembers the label of the first
    example and disregards the rest. The latter is a degenerate case kept
    for compatibility rather than a meaningful model.
    """

    value: bool
    updates: int = 0

    def __call__(self, features: Sequence[Scalar]) -> bool:
        return self.value


@dataclass(frozen=True)
class LinearHypothesis:
    """Classifier closing over the final weight vector of a training run."""

    weights: Vector
    updates: int = 0

    @property
    def dimension(self) -> int:
        """Number of raw features the hypothesis expects."""
        return len(self.weights) - 1

    def __call__(self, features: Sequence[Scalar]) -> bool:
        if len(features) != self.dimension:
            raise DimensionMismatchError(
                f"Hypothesis expects {self.dimension} features, got {len(features)}",
                expected=self.dimension,
                actual=len(features),
            )
        return evaluate(self.weights, augment(features))


def _resolve_cap(max_iterations: Optional[int]) -> Optional[int]:
    cap = max_iterations if max_iterations is not None else settings().max_iterations
    if cap is not None and cap < 0:
        raise ValueError(f"max_iterations must be non-negative, got {cap}")
    return cap


def _augmented(examples: Sequence[Example]) -> _Augmented:
    return [(augment(features), bool(label)) for features, label in examples]


def _misclassified(data: _Augmented, weights: Vector) -> Iterator[Tuple[int, Tuple[Vector, bool]]]:
    for index, (x, y) in enumerate(data):
        if evaluate(weights, x) != y:
            yield index, (x, y)


def _refine(data: _Augmented, dim: int, cap: Optional[int]) -> Iterator[Update]:
    # Invariant: after each step, weights have been corrected for every
    # example picked so far, always the earliest misclassified one.
    log_every = settings().log_every
    weights = zeros(dim + 1)
    step = 0
    while True:
        first = next(_misclassified(data, weights), None)
        if first is None:
            logger.info("Perceptron converged after %d update(s): weights=%s", step, weights)
            return
        if cap is not None and step >= cap:
            remaining = sum(1 for _ in _misclassified(data, weights))
            raise MaxIterationsExceeded(
                f"{remaining} example(s) still misclassified after {cap} update(s)",
                max_iterations=cap,
                weights=weights,
                misclassified=remaining,
            )
        index, (x, y) = first
        weights = add(weights, scale(1 if y else -1, x))
        step += 1
        logger.debug("update %d: example %d (label=%s) -> weights=%s", step, index, y, weights)
        if log_every and step % log_every == 0:
            logger.info("Perceptron still training: %d update(s) so far", step)
        yield Update(step=step, index=index, label=y, weights=weights)


def updates(dataset: Iterable[Example], max_iterations: Optional[int] = None) -> Iterator[Update]:
    """Yield every weight correction the training loop makes on ``dataset``.

    Empty and zero-dimensional datasets yield nothing. Dimension checks run when
    iteration starts.
    """
    examples = list(dataset)
    if not examples:
        return
    dim = check_dimensions(examples)
    if dim == 0:
        return
    yield from _refine(_augmented(examples), dim, _resolve_cap(max_iterations))


def train(
    dataset: Iterable[Example],
    max_iterations: Optional[int] = None,
) -> ConstantHypothesis | LinearHypothesis:
    """Train a perceptron on an ordered sequence of ``(features, label)`` pairs.

    Args:
        dataset: Labeled examples. Every feature vector must have the same
            length. Order matters: the earliest misclassified example is
            always the one corrected next.
        max_iterations: Cap on the number of weight updates. ``None`` falls back
            to the configured default, which is unbounded unless set.

    Returns:
        A callable mapping a raw feature vector to a boolean.

    Raises:
        DimensionMismatchError: feature vectors differ in length.
        MaxIterationsExceeded: the cap was reached before convergence.
    """
    examples = list(dataset)
    if not examples:
        logger.debug("Empty dataset; returning constant True hypothesis")
        return ConstantHypothesis(True)
    dim = check_dimensions(examples)
    if dim == 0:
        label = bool(examples[0][1])
        logger.debug("Zero-dimensional dataset; returning constant %s hypothesis", label)
        return ConstantHypothesis(label)

    weights = zeros(dim + 1)
    count = 0
    for update in _refine(_augmented(examples), dim, _resolve_cap(max_iterations)):
        weights = update.weights
        count = update.step
    return LinearHypothesis(weights, updates=count)


pla = train
