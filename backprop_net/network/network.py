import logging
import math
import random
import sys
from numbers import Integral, Real
from typing import Dict, List, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from .edge_index import EdgeIndex
from .elements import Edge, Node, NodeRole
from ..config import Config
from ..errors import ConfigError, DimensionMismatch, PrecedenceViolation

logger = logging.getLogger(__name__)

LAYERS = {NodeRole.INPUT: 0, NodeRole.HIDDEN: 1, NodeRole.OUTPUT: 2}

# Open interval bounds: smallest positive float and largest float below 1
ACTIVATION_MIN = sys.float_info.min
ACTIVATION_MAX = 1.0 - sys.float_info.epsilon / 2


def sigmoid(net: float) -> float:
    if net >= 0:
        s = 1.0 / (1.0 + math.exp(-net))
    else:
        z = math.exp(net)
        s = z / (1.0 + z)
    return min(max(s, ACTIVATION_MIN), ACTIVATION_MAX)


def _check_count(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"{name} must be >= 0, got {value}")
    return int(value)


class Network:
    """
    A fully-connected input -> hidden -> output network of sigmoid nodes,
    trained one example at a time with backpropagation and the delta rule.
    """
    def __init__(
        self,
        input_count: int,
        output_count: int,
        hidden_count: int,
        learning_rate: float = 0.1,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        input_count = _check_count("input_count", input_count)
        output_count = _check_count("output_count", output_count)
        hidden_count = _check_count("hidden_count", hidden_count)
        if isinstance(learning_rate, bool) or not isinstance(learning_rate, Real) \
                or not math.isfinite(learning_rate) or learning_rate <= 0:
            raise ConfigError(f"learning_rate must be a positive finite number, got {learning_rate!r}")

        self.learning_rate = float(learning_rate)
        self.rng = rng if rng is not None else random.Random(seed)

        self.nodes: Dict[int, Node] = {}
        self.input_nodes: List[Node] = []
        self.hidden_nodes: List[Node] = []
        self.output_nodes: List[Node] = []
        self.edge_index = EdgeIndex()
        self.node_idx = 0

        self.targets: Optional[List[float]] = None
        self._forwarded = False

        for _ in range(input_count):
            self.input_nodes.append(self._add_node(NodeRole.INPUT))

        for _ in range(output_count):
            self.output_nodes.append(self._add_node(NodeRole.OUTPUT))

        for _ in range(hidden_count):
            hidden = self._add_node(NodeRole.HIDDEN)
            self.hidden_nodes.append(hidden)

            for input_node in self.input_nodes:
                self.edge_index.add(input_node.id, hidden.id, self.rng.random())

            for output_node in self.output_nodes:
                self.edge_index.add(hidden.id, output_node.id, self.rng.random())

        logger.debug(
            f"Built network: {input_count} inputs, {hidden_count} hidden, "
            f"{output_count} outputs, {len(self.edge_index)} edges"
        )

    @classmethod
    def from_config(cls, config: Config, rng: Optional[random.Random] = None) -> "Network":
        return cls(
            config.input_size,
            config.output_size,
            config.hidden_count,
            learning_rate=getattr(config, "learning_rate", 0.1),
            rng=rng,
            seed=getattr(config, "seed", None),
        )

    def _add_node(self, role: NodeRole) -> Node:
        node = Node(self.node_idx, role)
        self.nodes[node.id] = node
        self.node_idx += 1
        return node

    @property
    def edges(self) -> Dict[int, Edge]:
        return {e.id: e for e in self.edge_index.by_pair.values()}

    # --- state ---
    def set_inputs(self, inputs: Sequence[float]):
        if len(inputs) != len(self.input_nodes):
            raise DimensionMismatch("inputs", len(self.input_nodes), len(inputs))

        for node, value in zip(self.input_nodes, inputs):
            node.activation = float(value)
        self._forwarded = False

    def set_targets(self, targets: Sequence[float]):
        if len(targets) != len(self.output_nodes):
            raise DimensionMismatch("targets", len(self.output_nodes), len(targets))
        self.targets = [float(t) for t in targets]

    def outputs(self) -> List[float]:
        return [n.activation for n in self.output_nodes]

    # --- passes ---
    def forward(self) -> List[float]:
        """Recompute hidden activations from inputs, then outputs from hidden."""
        for layer in (self.hidden_nodes, self.output_nodes):
            for node in layer:
                net = 0.0
                for edge in self.edge_index.edges_to(node.id):
                    net += self.nodes[edge.from_id].activation * edge.weight
                node.activation = sigmoid(net)

        self._forwarded = True
        return self.outputs()

    def backward(self):
        """
        Backpropagate the error of the last forward pass and apply the delta
        rule to every edge. Errors are computed in full before any weight moves.
        """
        if self.targets is None:
            raise PrecedenceViolation("backward() called before any targets were set")
        if not self._forwarded:
            raise PrecedenceViolation("backward() called without a forward() pass in this step")

        for node, target in zip(self.output_nodes, self.targets):
            a = node.activation
            node.error = a * (1 - a) * (target - a)

        for node in self.hidden_nodes:
            sigma = 0.0
            for edge in self.edge_index.edges_from(node.id):
                sigma += self.nodes[edge.to_id].error * edge.weight
            a = node.activation
            node.error = a * (1 - a) * sigma

        for edge in self.edge_index.by_pair.values():
            source = self.nodes[edge.from_id]
            dest = self.nodes[edge.to_id]
            edge.weight += self.learning_rate * dest.error * source.activation

        # Weights moved, so the activations no longer belong to them.
        self._forwarded = False

    def train_one(self, inputs: Sequence[float], targets: Sequence[float]):
        """Run one forward+backward step on a single example."""
        if len(inputs) != len(self.input_nodes):
            raise DimensionMismatch("inputs", len(self.input_nodes), len(inputs))
        if len(targets) != len(self.output_nodes):
            raise DimensionMismatch("targets", len(self.output_nodes), len(targets))

        self.set_inputs(inputs)
        self.set_targets(targets)
        self.forward()
        self.backward()

    train = train_one

    def evaluate_example(self, inputs: Sequence[float], targets: Sequence[float]) -> float:
        if len(targets) != len(self.output_nodes):
            raise DimensionMismatch("targets", len(self.output_nodes), len(targets))
        self.set_inputs(inputs)
        self.set_targets(targets)
        self.forward()
        return self.total_error()

    def total_error(self) -> float:
        """Half the squared distance between targets and current outputs."""
        if self.targets is None:
            raise PrecedenceViolation("total_error() called before any targets were set")
        return sum((t - n.activation) ** 2 for n, t in zip(self.output_nodes, self.targets)) / 2

    # --- reporting ---
    def log_state(self, log: logging.Logger, level: int = logging.DEBUG):
        for node in self.input_nodes + self.hidden_nodes + self.output_nodes:
            log.log(level, f"Node {node.id} ({node.role.value}) activation: {node.activation:.6f} error: {node.error:.6f}")
        for edge in self.edge_index.by_pair.values():
            log.log(level, f"Edge {edge.from_id} -> {edge.to_id} weight: {edge.weight:.6f}")

    def to_graph(self) -> nx.DiGraph:
        G = nx.DiGraph()
        for node in self.nodes.values():
            G.add_node(node.id, role=node.role.value, layer=LAYERS[node.role], activation=node.activation)
        for edge in self.edge_index.by_pair.values():
            G.add_edge(edge.from_id, edge.to_id, weight=edge.weight)
        return G

    def visualize(self, ax=None):
        """
        Draw the network layer by layer.
        Inputs = green, hidden = blue, outputs = red; edge width follows |weight|.
        """
        G = self.to_graph()
        colors = {"input": "lightgreen", "hidden": "lightblue", "output": "salmon"}

        pos = {}
        for layer in (self.input_nodes, self.hidden_nodes, self.output_nodes):
            for i, node in enumerate(layer):
                pos[node.id] = (LAYERS[node.role], -i)

        node_colors = [colors[G.nodes[n]["role"]] for n in G.nodes()]
        nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=800, ax=ax)

        weights = [abs(data["weight"]) for _, _, data in G.edges(data=True)]
        top = max(weights, default=0.0) or 1.0
        widths = [0.5 + 2.5 * w / top for w in weights]
        nx.draw_networkx_edges(G, pos, edgelist=list(G.edges()), width=widths, edge_color="black", ax=ax)

        labels = {n: f"{n}\n{G.nodes[n]['activation']:.2f}" for n in G.nodes()}
        nx.draw_networkx_labels(G, pos, labels=labels, font_size=8, ax=ax)

        if ax is None:
            plt.show()

    def __repr__(self):
        return (
            f"Network(inputs={len(self.input_nodes)}, hidden={len(self.hidden_nodes)}, "
            f"outputs={len(self.output_nodes)}, lr={self.learning_rate})"
        )
