from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

import pandas as pd

from ..errors import ConfigError, DimensionMismatch


@dataclass(frozen=True)
class Example:
    inputs: Tuple[float, ...]
    targets: Tuple[float, ...]


class Dataset:
    """An ordered collection of input/target pairs of fixed widths."""
    def __init__(self, examples: Sequence[Example]):
        self.examples: List[Example] = [
            Example(tuple(float(v) for v in e.inputs), tuple(float(v) for v in e.targets))
            for e in examples
        ]
        if not self.examples:
            raise ConfigError("Dataset needs at least one example")

        self.input_size = len(self.examples[0].inputs)
        self.output_size = len(self.examples[0].targets)
        for i, example in enumerate(self.examples):
            if len(example.inputs) != self.input_size:
                raise DimensionMismatch(f"example {i} inputs", self.input_size, len(example.inputs))
            if len(example.targets) != self.output_size:
                raise DimensionMismatch(f"example {i} targets", self.output_size, len(example.targets))

    @classmethod
    def toy(cls) -> "Dataset":
        # One-hot input -> 2-bit index of the hot position, counted from the right
        return cls([
            Example((0, 0, 0, 1), (0, 0)),
            Example((0, 0, 1, 0), (0, 1)),
            Example((0, 1, 0, 0), (1, 0)),
            Example((1, 0, 0, 0), (1, 1)),
        ])

    @classmethod
    def from_frame(cls, df: pd.DataFrame, input_cols: Sequence[str], target_cols: Sequence[str]) -> "Dataset":
        inputs = df[list(input_cols)].to_numpy(dtype=float)
        targets = df[list(target_cols)].to_numpy(dtype=float)
        return cls([Example(tuple(x), tuple(y)) for x, y in zip(inputs, targets)])

    def validate(self, network):
        if self.input_size != len(network.input_nodes):
            raise DimensionMismatch("dataset inputs", len(network.input_nodes), self.input_size)
        if self.output_size != len(network.output_nodes):
            raise DimensionMismatch("dataset targets", len(network.output_nodes), self.output_size)

    def __iter__(self) -> Iterator[Example]:
        return iter(self.examples)

    def __len__(self):
        return len(self.examples)
