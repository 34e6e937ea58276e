"""Seed the database with sample users and backdated quiz histories.

Run: python scripts/seed.py
"""

import logging
import os
import sys
from datetime import datetime, timezone

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from prephub.auth.passwords import hash_password
from prephub.core.config import get_settings
from prephub.db.base import Base
from prephub.db.session import SessionLocal, engine
from prephub.features.achievements.scoring import percentage_for, xp_for
from prephub.features.quizzes.models import QuizAttempt
from prephub.features.users.models import User

logger = logging.getLogger("seed")

SEED_PASSWORD = "password123"


def _day(value: str) -> datetime:
    return datetime.strptime(value, "%Y-%m-%d").replace(tzinfo=timezone.utc)


SAMPLE_USERS = [
    {
        "name": "Aarav Sharma",
        "email": "aarav@upsc.com",
        "history": [
            ("Geography", 16, 20, "2026-02-20"),
            ("History", 14, 20, "2026-02-21"),
            ("Polity", 18, 20, "2026-02-22"),
        ],
    },
    {
        "name": "Priya Patel",
        "email": "priya@upsc.com",
        "history": [
            ("Economics", 12, 20, "2026-02-19"),
            ("Science", 17, 20, "2026-02-23"),
        ],
    },
    {
        "name": "Test User",
        "email": "testuser@upsc.com",
        "history": [
            ("Geography", 10, 20, "2026-02-18"),
            ("Polity", 15, 20, "2026-02-20"),
            ("History", 19, 20, "2026-02-24"),
            ("Economics", 8, 20, "2026-02-25"),
        ],
    },
]


def build_user(sample: dict, password_hash: str) -> User:
    """Build a user whose xp is the sum of its attempts' xp_earned."""
    user = User(name=sample["name"], email=sample["email"], password_hash=password_hash, streak=0, last_quiz_date=None)
    xp = 0
    for subject, score, total, day in sample["history"]:
        percentage = percentage_for(score, total)
        earned = xp_for(percentage)
        xp += earned
        user.quiz_history.append(
            QuizAttempt(
                subject=subject,
                score=score,
                total=total,
                percentage=percentage,
                xp_earned=earned,
                date=_day(day),
            )
        )
    user.xp = xp
    return user


def seed() -> int:
    settings = get_settings()
    Base.metadata.create_all(bind=engine)
    password_hash = hash_password(SEED_PASSWORD, rounds=settings.bcrypt_rounds)

    with SessionLocal() as db:
        db.query(QuizAttempt).delete()
        db.query(User).delete()
        logger.info("seed.cleared")

        users = [build_user(sample, password_hash) for sample in SAMPLE_USERS]
        db.add_all(users)
        db.commit()

        for u in users:
            logger.info("seed.user name=%s email=%s quizzes=%d xp=%d", u.name, u.email, len(u.quiz_history), u.xp)
    return len(users)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    count = seed()
    print(f"Seeded {count} users. Login with any user using password: {SEED_PASSWORD}")
    print("Example: testuser@upsc.com / password123")


if __name__ == "__main__":
    main()
