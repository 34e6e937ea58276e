from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from prephub.db.base import Base

NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 255


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), unique=True, nullable=False, index=True)  # stored lower-cased
    password_hash = Column(String(128), nullable=False)
    xp = Column(Integer, nullable=False, default=0, server_default="0")
    streak = Column(Integer, nullable=False, default=0, server_default="0")
    last_quiz_date = Column(DateTime(timezone=True), nullable=True)
    # Bumped on every flush; a stale UPDATE matches no row and raises StaleDataError.
    version = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    quiz_history = relationship(
        "QuizAttempt",
        back_populates="user",
        order_by="QuizAttempt.id",
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version}
    __table_args__ = (
        CheckConstraint("xp >= 0", name="check_users_xp_non_negative"),
        CheckConstraint("streak >= 0", name="check_users_streak_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email} xp={self.xp} streak={self.streak}>"
