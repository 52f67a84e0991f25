"""Use cases de agenda."""

from app.use_cases.calendar.get_calendar_stats import GetCalendarStatsUseCase

__all__ = ["GetCalendarStatsUseCase"]
