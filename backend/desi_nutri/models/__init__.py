# Import all models here
from desi_nutri.models.user_profile import Profile
from desi_nutri.models.user_goals import UserGoals
from desi_nutri.models.workout_plan import WorkoutPlan
from desi_nutri.models.tracking import ExerciseLog, FoodLog, WaterLog
