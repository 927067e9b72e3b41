"""Application constants."""

# Dashboard composition
DASHBOARD_RECENT_WORKOUTS = 3
DASHBOARD_ACTIVE_GOALS = 5
WEEK_WINDOW_DAYS = 7

# Rough display estimate, not a physiological model
CALORIES_PER_MINUTE = 5

# Goals
GOAL_PROGRESS_COMPLETE = 100
