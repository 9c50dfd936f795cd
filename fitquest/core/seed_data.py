"""Reference data seeded at deployment: exercise catalogue and achievement definitions."""

EXERCISES = [
    {"name": "Bench Press", "category": "strength", "muscle_groups": ["chest", "triceps", "shoulders"], "equipment": "barbell"},
    {"name": "Squat", "category": "strength", "muscle_groups": ["quadriceps", "glutes", "hamstrings"], "equipment": "barbell"},
    {"name": "Deadlift", "category": "strength", "muscle_groups": ["back", "glutes", "hamstrings"], "equipment": "barbell"},
    {"name": "Pull-up", "category": "strength", "muscle_groups": ["back", "biceps"], "equipment": "pull-up bar"},
    {"name": "Push-up", "category": "strength", "muscle_groups": ["chest", "triceps", "shoulders"], "equipment": "bodyweight"},
    {"name": "Running", "category": "cardio", "muscle_groups": ["legs"], "equipment": "none"},
    {"name": "Cycling", "category": "cardio", "muscle_groups": ["legs"], "equipment": "bicycle"},
    {"name": "Rowing", "category": "cardio", "muscle_groups": ["back", "arms", "legs"], "equipment": "rowing machine"},
    {"name": "Bicep Curls", "category": "strength", "muscle_groups": ["biceps"], "equipment": "dumbbells"},
    {"name": "Shoulder Press", "category": "strength", "muscle_groups": ["shoulders", "triceps"], "equipment": "dumbbells"},
]

ACHIEVEMENTS = [
    {"name": "First Workout", "description": "Complete your first workout", "points_reward": 100, "requirement_type": "workouts_count", "requirement_value": 1},
    {"name": "Consistent Trainee", "description": "Complete 10 workouts", "points_reward": 250, "requirement_type": "workouts_count", "requirement_value": 10},
    {"name": "Gym Veteran", "description": "Complete 50 workouts", "points_reward": 500, "requirement_type": "workouts_count", "requirement_value": 50},
    {"name": "Century Club", "description": "Complete 100 workouts", "points_reward": 1000, "requirement_type": "workouts_count", "requirement_value": 100},
    {"name": "Week Warrior", "description": "Complete 7 consecutive days of workouts", "points_reward": 300, "requirement_type": "streak_days", "requirement_value": 7},
    {"name": "Month Master", "description": "Complete 30 consecutive days of workouts", "points_reward": 1000, "requirement_type": "streak_days", "requirement_value": 30},
]
