"""Application constants."""

# Workout builder limits
MAX_EXERCISES_PER_WORKOUT = 20
MAX_SETS_PER_EXERCISE = 50

# Per-set bounds; weight columns are NUMERIC(6,2)
MAX_REPS_PER_SET = 10000
MAX_WEIGHT_PER_SET = 9999.99
MAX_EXERCISE_DURATION_SECONDS = 86400

# Gamification: every level spans this many points
POINTS_PER_LEVEL = 1000

# (minimum level, title); highest matching threshold wins
RANK_TITLES = (
    (1, "Beginner"),
    (2, "Intermediate"),
    (4, "Advanced"),
    (7, "Elite"),
    (10, "Legend"),
)

# Leaderboard
LEADERBOARD_MAX_LIMIT = 100

# Limit streak scan to last ~14 months so the query stays fast with large history
STREAK_LOOKBACK_DAYS = 430

# Default username prefix for bootstrapped profiles: user_<first 8 chars of account id>
DEFAULT_USERNAME_PREFIX = "user_"
