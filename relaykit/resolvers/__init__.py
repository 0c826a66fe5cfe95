from .people import people
from .viewer import viewer

__all__ = ["people", "viewer"]
