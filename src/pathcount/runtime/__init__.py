"""
Runtime support for query execution (profiling).
"""

from .profiling import Profiler, ProfileStats

__all__ = ["Profiler", "ProfileStats"]
