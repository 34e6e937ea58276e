from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from prephub.db.base import Base

SUBJECT_MAX_LENGTH = 64


class QuizAttempt(Base):
    """One submitted quiz. Rows are only ever inserted."""

    __tablename__ = "quiz_attempts"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    subject = Column(String(SUBJECT_MAX_LENGTH), nullable=False)
    score = Column(Integer, nullable=False)
    total = Column(Integer, nullable=False)
    percentage = Column(Integer, nullable=False)
    xp_earned = Column(Integer, nullable=False, default=0, server_default="0")
    date = Column(DateTime(timezone=True), nullable=False, index=True)

    user = relationship("User", back_populates="quiz_history")

    __table_args__ = (
        CheckConstraint("total > 0", name="check_quiz_attempts_total_positive"),
        CheckConstraint("score >= 0", name="check_quiz_attempts_score_non_negative"),
        CheckConstraint("percentage >= 0 AND percentage <= 100", name="check_quiz_attempts_percentage_range"),
    )

    def __repr__(self) -> str:
        return f"<QuizAttempt id={self.id} user_id={self.user_id} subject={self.subject} percentage={self.percentage}>"
