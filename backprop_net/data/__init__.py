from .dataset import Dataset, Example
from .pass_record import PassRecord

__all__ = ["Dataset", "Example", "PassRecord"]
