from .slice import TextSlice, NPOS

__all__ = ["TextSlice", "NPOS"]
