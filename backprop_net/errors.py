class NetworkError(Exception):
    """Base class for every error raised by the network and its driver."""


class ConfigError(NetworkError, ValueError):
    """Invalid construction parameters (counts, learning rate, prompts)."""


class DimensionMismatch(NetworkError, ValueError):
    """A vector's length does not match the node partition it feeds."""
    def __init__(self, name: str, expected: int, actual: int):
        super().__init__(f"{name} has length {actual}, expected {expected}")
        self.name = name
        self.expected = expected
        self.actual = actual


class PrecedenceViolation(NetworkError, RuntimeError):
    """A pass was invoked before the state it reads was produced."""
