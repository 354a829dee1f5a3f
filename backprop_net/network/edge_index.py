from typing import Dict, List, Optional, Tuple

from .elements import Edge


class EdgeIndex:
    """Tracks the single edge allowed between an ordered pair of nodes."""
    def __init__(self):
        self.counter = 0
        self.by_pair: Dict[Tuple[int, int], Edge] = {}
        self.incoming: Dict[int, List[Edge]] = {}
        self.outgoing: Dict[int, List[Edge]] = {}

    def add(self, from_id: int, to_id: int, weight: float) -> Edge:
        key = (from_id, to_id)
        if key in self.by_pair:
            raise ValueError(f"Edge {from_id}->{to_id} already exists")

        edge = Edge(self.counter, from_id, to_id, weight)
        self.counter += 1
        self.by_pair[key] = edge
        self.outgoing.setdefault(from_id, []).append(edge)
        self.incoming.setdefault(to_id, []).append(edge)
        return edge

    def get(self, from_id: int, to_id: int) -> Optional[Edge]:
        return self.by_pair.get((from_id, to_id))

    def edges_to(self, node_id: int) -> List[Edge]:
        return self.incoming.get(node_id, [])

    def edges_from(self, node_id: int) -> List[Edge]:
        return self.outgoing.get(node_id, [])

    def __len__(self):
        return len(self.by_pair)
