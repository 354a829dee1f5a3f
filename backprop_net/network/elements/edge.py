class Edge:
    """Represents a weighted connection between two node ids."""
    def __init__(self, id: int, from_id: int, to_id: int, weight: float):
        self.id = id
        self.from_id = from_id
        self.to_id = to_id
        self.weight = weight

    def __repr__(self):
        return f"Edge({self.from_id}->{self.to_id}, w={self.weight:.3f})"
