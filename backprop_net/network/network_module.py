import torch
import torch.nn as nn

from .network import ACTIVATION_MAX, ACTIVATION_MIN, Network
from ..errors import DimensionMismatch


class NetworkModule(nn.Module):
    def __init__(self, network: Network):
        """Mirror a Network's current weights as a batched torch module."""
        super().__init__()
        self.network = network

        # Inputs occupy the first columns of the value table
        ordered = network.input_nodes + network.hidden_nodes + network.output_nodes
        self.node_index = {n.id: idx for idx, n in enumerate(ordered)}
        self.num_nodes = len(ordered)
        self.num_inputs = len(network.input_nodes)

        edges = list(network.edge_index.by_pair.values())

        # Register weights
        self.weights = nn.Parameter(
            torch.tensor([e.weight for e in edges], dtype=torch.float64),
            requires_grad=False,
        )

        # Build edge index tensors
        src = [self.node_index[e.from_id] for e in edges]
        dst = [self.node_index[e.to_id] for e in edges]
        self.register_buffer("src_idx", torch.tensor(src, dtype=torch.long))
        self.register_buffer("dst_idx", torch.tensor(dst, dtype=torch.long))

        self.hidden_idx = [self.node_index[n.id] for n in network.hidden_nodes]
        self.output_idx = [self.node_index[n.id] for n in network.output_nodes]

    def forward(self, x):
        if x.dim() != 2 or x.size(1) != self.num_inputs:
            raise DimensionMismatch("inputs", self.num_inputs, x.size(-1) if x.dim() else 0)

        batch_size = x.size(0)
        values = torch.zeros(batch_size, self.num_nodes, dtype=torch.float64, device=x.device)
        values[:, :self.num_inputs] = x.to(torch.float64)

        for layer in (self.hidden_idx, self.output_idx):
            for idx in layer:
                mask = (self.dst_idx == idx)
                if mask.any():
                    total = (values[:, self.src_idx[mask]] * self.weights[mask]).sum(dim=1)
                else:
                    total = torch.zeros(batch_size, dtype=torch.float64, device=x.device)
                values[:, idx] = torch.sigmoid(total).clamp(ACTIVATION_MIN, ACTIVATION_MAX)

        return values[:, self.output_idx]
