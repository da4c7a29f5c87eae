from liftlog.models.catalog import (
    ExerciseTemplate,
    MuscleGroup,
    exercise_template_muscle_groups,
)
from liftlog.models.user import User
from liftlog.models.workout import LoggedExercise, Workout

__all__ = [
    "ExerciseTemplate",
    "LoggedExercise",
    "MuscleGroup",
    "User",
    "Workout",
    "exercise_template_muscle_groups",
]
