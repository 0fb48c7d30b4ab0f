from .perf import Perf
from .logs import setup_query_logger

__all__ = ["Perf", "setup_query_logger"]
