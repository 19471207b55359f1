from .core import run_case, run_batch

__all__ = ["run_case", "run_batch"]
