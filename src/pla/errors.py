class PLAError(Exception):
    """Base error for perceptron training and evaluation."""

    def __init__(self, message: str = "", code: str | None = None, details: dict | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class DimensionMismatchError(PLAError, ValueError):
    """Vectors that must share a dimension do not."""

    def __init__(self, message: str = "", *, expected: int, actual: int, index: int | None = None) -> None:
        details = {"expected": expected, "actual": actual}
        if index is not None:
            details["index"] = index
        super().__init__(message, code="dimension_mismatch", details=details)
        self.expected = expected
        self.actual = actual
        self.index = index


class NotSeparableError(PLAError):
    """Training gave up before every example was classified correctly."""

    def __init__(self, message: str = "", code: str | None = "not_separable", details: dict | None = None) -> None:
        super().__init__(message, code=code, details=details)


class MaxIterationsExceeded(NotSeparableError):
    """The update cap was reached with misclassified examples left.

    Only raised when a cap was requested; an uncapped run on data that is not
    linearly separable never returns.
    """

    def __init__(self, message: str = "", *, max_iterations: int, weights: tuple, misclassified: int) -> None:
        super().__init__(
            message,
            code="max_iterations",
            details={
                "max_iterations": max_iterations,
                "weights": weights,
                "misclassified": misclassified,
            },
        )
        self.max_iterations = max_iterations
        self.weights = weights
