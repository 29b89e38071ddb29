from .cycle import cycle
from .take import drop, take

__all__ = ("cycle", "drop", "take")
