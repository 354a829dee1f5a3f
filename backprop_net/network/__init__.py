from .network import Network, sigmoid
from .network_module import NetworkModule
from .elements import Edge, Node, NodeRole

__all__ = ["Network", "NetworkModule", "Edge", "Node", "NodeRole", "sigmoid"]
