"""
Progress module
Daily completion summary, motivational tiers and the widget read path
"""
from .aggregator import daily_summary, motivational_tier, progress_color
from .widget import build_widget_state

__all__ = ['daily_summary', 'motivational_tier', 'progress_color', 'build_widget_state']
