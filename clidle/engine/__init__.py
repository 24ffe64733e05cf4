from .quality import CharQuality
from .scoring import qualify, score, to_pattern
from .alphabet import AlphabetTracker, overrides

__all__ = ["CharQuality", "qualify", "score", "to_pattern", "AlphabetTracker", "overrides"]
