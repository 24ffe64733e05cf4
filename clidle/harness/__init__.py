from .core import replay_case, replay_batch, summarize
from .io import build_manifest, write_csv, write_manifest

__all__ = ["replay_case", "replay_batch", "summarize", "build_manifest", "write_csv",
           "write_manifest"]
