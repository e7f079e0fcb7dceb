"""
pla – perceptron learning algorithm

Public surface:
- Training: train (alias pla), updates, Update
- Hypotheses: evaluate, LinearHypothesis, ConstantHypothesis
- Vector algebra: augment, add, scale, dot, zeros
- Data helpers: random_separable_dataset, reproduces_labels, misclassified
- Config: configure, config (context manager), settings
"""

__version__ = "0.1.0"

from .config import configure, config, settings
from .errors import (
    PLAError,
    DimensionMismatchError,
    NotSeparableError,
    MaxIterationsExceeded,
)
from .vector import augment, add, scale, dot, zeros
from .perceptron import (
    ConstantHypothesis,
    LinearHypothesis,
    Update,
    evaluate,
    pla,
    train,
    updates,
)
from .sampling import misclassified, random_separable_dataset, reproduces_labels

__all__ = [
    # Config
    "configure",
    "config",
    "settings",
    # Errors
    "PLAError",
    "DimensionMismatchError",
    "NotSeparableError",
    "MaxIterationsExceeded",
    # Vector algebra
    "augment",
    "add",
    "scale",
    "dot",
    "zeros",
    # Training & hypotheses
    "ConstantHypothesis",
    "LinearHypothesis",
    "Update",
    "evaluate",
    "pla",
    "train",
    "updates",
    # Data helpers
    "misclassified",
    "random_separable_dataset",
    "reproduces_labels",
    "__version__",
]
