from .corpus import WordCorpus, count_lines
from .io import read_buffer, read_lines, write_lines
from .validator import validate_wordlists, pretty_summary

__all__ = ["WordCorpus", "count_lines", "read_buffer", "read_lines", "write_lines",
           "validate_wordlists", "pretty_summary"]
