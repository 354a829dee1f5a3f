from enum import Enum


class NodeRole(Enum):
    INPUT = "input"
    HIDDEN = "hidden"
    OUTPUT = "output"


class Node:
    """Represents a neuron: a scalar activation and error tagged with a role."""
    def __init__(self, id: int, role: NodeRole):
        self.id = id
        self.role = role
        self.activation = 0.0
        self.error = 0.0

    def __repr__(self):
        return f"Node(id={self.id}, role='{self.role.value}', a={self.activation:.3f}, e={self.error:.3f})"
