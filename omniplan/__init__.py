"""OmniPlan: week-scoped planning records, habits, recurring events and AI focus suggestions."""
