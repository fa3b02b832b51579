"""
Pydantic models for derived whole-day progress
"""
from pydantic import BaseModel


class DailySummary(BaseModel):
    """Completion totals for one day"""
    completed_count: int
    total_count: int
    percentage: int


class WidgetState(BaseModel):
    """Everything the home-screen widget renders"""
    date: str
    summary: DailySummary
    status_text: str
    motivational_message: str
    progress_color: str
