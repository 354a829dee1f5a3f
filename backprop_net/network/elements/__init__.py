from .edge import Edge
from .node import Node, NodeRole

__all__ = ["Edge", "Node", "NodeRole"]
