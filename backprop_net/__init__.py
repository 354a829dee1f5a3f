from .config import Config
from .training_loop import TrainingLoop
from .network import Network, NetworkModule
from .data import Dataset, Example, PassRecord
from .evaluate import evaluate
from .errors import ConfigError, DimensionMismatch, NetworkError, PrecedenceViolation

__all__ = [
    "Config",
    "TrainingLoop",
    "Network",
    "NetworkModule",
    "Dataset",
    "Example",
    "PassRecord",
    "evaluate",
    "ConfigError",
    "DimensionMismatch",
    "NetworkError",
    "PrecedenceViolation",
]
