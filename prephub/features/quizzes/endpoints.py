#Quizzes feature - submit a result, read back the full history
from fastapi import APIRouter, Depends

from prephub.common.deps import Clock, get_clock, get_user_repository
from prephub.features.stats.service import stats_service
from prephub.features.users.repository import UserRepository
from .schemas import QuizHistoryResponse, QuizSubmissionRequest, QuizSubmissionResponse
from .service import QuizResultRecorder
from .validation import validate_submission

router = APIRouter(prefix="/api/quiz-history", tags=["quizzes"])


#Save a quiz result and return the updated progress
@router.post("", response_model=QuizSubmissionResponse)
def submit_quiz(
    payload: QuizSubmissionRequest,
    repository: UserRepository = Depends(get_user_repository),
    clock: Clock = Depends(get_clock),
):
    submission = validate_submission(payload)
    outcome = QuizResultRecorder(repository, clock=clock).record(submission)
    progress = outcome.summary.as_fields()
    # The submission response reports xp as totalXP.
    progress.pop("xp")
    return QuizSubmissionResponse(xp_earned=outcome.xp_earned, total_xp=outcome.total_xp, **progress)


#Full history with progress
@router.get("/{email}", response_model=QuizHistoryResponse)
def get_quiz_history(email: str, repository: UserRepository = Depends(get_user_repository)):
    return stats_service.get_history(repository, email)
