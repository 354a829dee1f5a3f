from typing import Dict

import torch

from .data import Dataset
from .network import Network, NetworkModule


def evaluate(network: Network, dataset: Dataset) -> Dict[str, float]:
    """Score the whole dataset against the network's current weights without touching them."""
    dataset.validate(network)
    net = NetworkModule(network)
    net.eval()

    inputs = torch.tensor([e.inputs for e in dataset], dtype=torch.float64)
    targets = torch.tensor([e.targets for e in dataset], dtype=torch.float64)

    with torch.no_grad():
        output = net(inputs)
        loss = ((targets - output) ** 2).sum(dim=1) / 2
        predicted = (output >= 0.5).to(torch.float64)
        correct = (predicted == targets).all(dim=1)

    return {
        "loss": loss.mean().item(),
        "accuracy": correct.to(torch.float64).mean().item(),
    }
