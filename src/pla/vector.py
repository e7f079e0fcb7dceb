"""Small fixed-size vector algebra over tuples of scalars."""

from __future__ import annotations

from typing import Sequence, Tuple, Union

from .errors import DimensionMismatchError

Scalar = Union[int, float]
Vector = Tuple[Scalar, ...]
Example = Tuple[Sequence[Scalar], bool]


def _require_same_dimension(a: Sequence[Scalar], b: Sequence[Scalar]) -> None:
    if len(a) != len(b):
        raise DimensionMismatchError(
            f"Vector dimensions differ: {len(a)} != {len(b)}",
            expected=len(a),
            actual=len(b),
        )


def zeros(dim: int) -> Vector:
    return (0,) * dim


def augment(features: Sequence[Scalar]) -> Vector:
    """Prepend the constant bias term ``1`` to a feature vector."""
    return (1, *features)


def add(a: Sequence[Scalar], b: Sequence[Scalar]) -> Vector:
    _require_same_dimension(a, b)
    return tuple(x + y for x, y in zip(a, b))


def scale(k: Scalar, a: Sequence[Scalar]) -> Vector:
    return tuple(k * x for x in a)


def dot(a: Sequence[Scalar], b: Sequence[Scalar]) -> Scalar:
    _require_same_dimension(a, b)
    return sum(x * y for x, y in zip(a, b))


def check_dimensions(dataset: Sequence[Example]) -> int:
    """Return the feature dimension shared by every example in ``dataset``.

    Raises:
        DimensionMismatchError: an example's features differ in length from the
            first example's; ``index`` names the first offender.
    """
    if not dataset:
        raise ValueError("Cannot determine the dimension of an empty dataset")
    expected = len(dataset[0][0])
    for index, (features, _label) in enumerate(dataset):
        if len(features) != expected:
            raise DimensionMismatchError(
                f"Example {index} has {len(features)} features, expected {expected}",
                expected=expected,
                actual=len(features),
                index=index,
            )
    return expected
