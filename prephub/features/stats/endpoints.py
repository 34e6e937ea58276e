from fastapi import APIRouter, Depends

from prephub.common.deps import get_user_repository
from prephub.features.users.repository import UserRepository
from .schemas import StatsResponse
from .service import stats_service

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("/{email}", response_model=StatsResponse)
def get_stats(email: str, repository: UserRepository = Depends(get_user_repository)):
    """Dashboard view: progress, per-subject stats and the 10 latest quizzes."""
    return stats_service.get_stats(repository, email)
