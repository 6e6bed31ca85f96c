"""
Auth operation metrics: call counters, duration timers and delay gauges.
"""

from .auth_metrics import AuthMetrics

__all__ = ["AuthMetrics"]
