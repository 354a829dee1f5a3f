import unittest

import pandas as pd

from backprop_net.data import Dataset, Example, PassRecord
from backprop_net.network import Network
from backprop_net.errors import ConfigError, DimensionMismatch


class TestDataset(unittest.TestCase):
    def test_toy(self):
        dataset = Dataset.toy()
        self.assertEqual(len(dataset), 4)
        self.assertEqual(dataset.input_size, 4)
        self.assertEqual(dataset.output_size, 2)
        self.assertEqual(dataset.examples[3], Example((1.0, 0.0, 0.0, 0.0), (1.0, 1.0)))
        for example in dataset:
            self.assertEqual(sum(example.inputs), 1.0)

    def test_ragged_examples(self):
        with self.assertRaises(DimensionMismatch):
            Dataset([Example((0, 1), (1,)), Example((0, 1, 1), (1,))])
        with self.assertRaises(DimensionMismatch):
            Dataset([Example((0, 1), (1,)), Example((0, 1), (1, 0))])

    def test_empty(self):
        with self.assertRaises(ConfigError):
            Dataset([])

    def test_validate(self):
        dataset = Dataset.toy()
        dataset.validate(Network(4, 2, 3, seed=0))
        with self.assertRaises(DimensionMismatch):
            dataset.validate(Network(3, 2, 3, seed=0))
        with self.assertRaises(DimensionMismatch):
            dataset.validate(Network(4, 1, 3, seed=0))

    def test_from_frame(self):
        df = pd.DataFrame({"a": [0, 1], "b": [1, 0], "y": [1, 0]})
        dataset = Dataset.from_frame(df, ["a", "b"], ["y"])
        self.assertEqual(len(dataset), 2)
        self.assertEqual(dataset.examples[0], Example((0.0, 1.0), (1.0,)))


class TestPassRecord(unittest.TestCase):
    def test_row(self):
        record = PassRecord(pass_index=2, total_error=0.5, metrics={"loss": 0.1, "accuracy": 0.75}, timestamp=1.0)
        self.assertEqual(
            record.as_row(),
            {"pass": 2, "total_error": 0.5, "loss": 0.1, "accuracy": 0.75, "timestamp": 1.0},
        )
