"""
Analysis over captured event views.
"""

from .filtering import FilterSpec, FilterEngine, compile_filter
from .threats import ThreatEngine
from .stats import StatsAggregator
from .breakdown import ThreatSummary, TrafficBreakdown, summarize_threats, breakdown

__all__ = [
    'FilterSpec',
    'FilterEngine',
    'compile_filter',
    'ThreatEngine',
    'StatsAggregator',
    'ThreatSummary',
    'TrafficBreakdown',
    'summarize_threats',
    'breakdown',
]
