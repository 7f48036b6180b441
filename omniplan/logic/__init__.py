"""Core planning logic.

Subpackages:
- weeks: week record lifecycle and month aggregation
- habits: habit visibility, habit operations and streaks
- planning: week editing and AI-assisted focus/scheduling
"""
__all__ = ["weeks", "habits", "planning"]
