# Import all models here so Alembic can discover them
from prephub.db.base import Base

# User first (referenced by quiz attempts)
from prephub.features.users.models import User
from prephub.features.quizzes.models import QuizAttempt

# This ensures all models are registered with SQLAlchemy
__all__ = [
    "Base",
    "User",
    "QuizAttempt",
]
