import os
import random
import logging
from numbers import Integral
from typing import List, Optional

import pandas as pd
from matplotlib.figure import Figure

from .config import Config
from .data import Dataset, PassRecord
from .evaluate import evaluate
from .network import Network
from .errors import ConfigError, NetworkError

LOGGER_NAME = "BackpropTraining"
STATS_HEADERS = ["pass", "total_error", "loss", "accuracy", "timestamp"]

# -------------------------------
# Logging helpers
# -------------------------------
def setup_logger(log_file: Optional[str]) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    close_logger(logger)

    fmt = logging.Formatter("[%(asctime)s][%(name)s][%(levelname)s] %(message)s")

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        _ensure_parent(log_file)
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger

def close_logger(logger: logging.Logger):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

def _ensure_parent(path: str):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

# -------------------------------
# Training driver
# -------------------------------
class TrainingLoop:
    def __init__(self, config: Config) -> None:
        self.config = config
        self.passes = getattr(config, "passes", 1)
        self.log_path = getattr(config, "log_path", None)
        self.stats_path = getattr(config, "stats_path", None)
        self.plot_path = getattr(config, "plot_path", None)
        self.network: Optional[Network] = None

        if isinstance(self.passes, bool) or not isinstance(self.passes, Integral) or self.passes < 0:
            raise ConfigError(f"passes must be a non-negative integer, got {self.passes!r}")

    def run(self, dataset: Optional[Dataset] = None) -> List[PassRecord]:
        logger = setup_logger(self.log_path)
        try:
            return self._train(logger, dataset if dataset is not None else Dataset.toy())
        finally:
            close_logger(logger)

    def _train(self, logger: logging.Logger, dataset: Dataset) -> List[PassRecord]:
        try:
            self.network = Network.from_config(self.config, rng=random.Random(getattr(self.config, "seed", None)))
            dataset.validate(self.network)
        except NetworkError as e:
            logger.error(f"Cannot start training: {e}")
            raise

        logger.info(f"Starting training: {self.network}, {len(dataset)} examples, {self.passes} passes")

        if self.stats_path and not os.path.exists(self.stats_path):
            _ensure_parent(self.stats_path)
            pd.DataFrame(columns=STATS_HEADERS).to_csv(self.stats_path, index=False)

        records = []
        for pass_index in range(self.passes):
            logger.debug(f"---------PASS - {pass_index + 1}----------")
            total_error = 0.0
            for line, example in enumerate(dataset):
                # Error of the weights this step is about to correct
                total_error += self.network.evaluate_example(example.inputs, example.targets)
                self.network.train_one(example.inputs, example.targets)

                if getattr(self.config, "log_state", False):
                    logger.debug(f"---------LINE - {line}----------")
                    self.network.log_state(logger)

            record = PassRecord(
                pass_index=pass_index + 1,
                total_error=total_error,
                metrics=evaluate(self.network, dataset),
            )
            records.append(record)
            self.log_stats(record)
            logger.info(
                f"Pass {record.pass_index}: Total error: {record.total_error:.6f} | "
                f"loss={record.metrics['loss']:.6f}, accuracy={record.metrics['accuracy']:.2f}"
            )

        if self.plot_path:
            self.save_plot(self.plot_path)
            logger.info(f"Saved network plot to {self.plot_path}")

        logger.info("Training Complete")
        return records

    def log_stats(self, record: PassRecord) -> None:
        if not self.stats_path:
            return
        df = pd.DataFrame([record.as_row()], columns=STATS_HEADERS)
        df.to_csv(self.stats_path, mode="a", header=False, index=False)

    def save_plot(self, path: str) -> None:
        _ensure_parent(path)
        fig = Figure(figsize=(8, 6))
        ax = fig.subplots()
        self.network.visualize(ax=ax)
        ax.set_axis_off()
        fig.savefig(path)
