from typing import Dict
from dataclasses import dataclass, field
import time


@dataclass
class PassRecord:
    pass_index: int
    total_error: float

    metrics: Dict[str, float] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)

    def as_row(self) -> Dict[str, float]:
        return {
            "pass": self.pass_index,
            "total_error": self.total_error,
            "loss": self.metrics.get("loss"),
            "accuracy": self.metrics.get("accuracy"),
            "timestamp": self.timestamp,
        }
