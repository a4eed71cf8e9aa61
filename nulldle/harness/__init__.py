from .core import RandomConsistentPlayer, run_case, run_batch
from .io import write_csv, write_manifest
from .summary import summarize

__all__ = ["RandomConsistentPlayer", "run_case", "run_batch", "write_csv", "write_manifest",
           "summarize"]
