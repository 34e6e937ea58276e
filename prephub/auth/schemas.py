from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from prephub.features.achievements.schemas import ProgressResponse
from prephub.features.quizzes.schemas import QuizAttemptResponse
from prephub.features.users.schemas import UserIdentity


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class RegisterResponse(BaseModel):
    success: bool = True
    message: str
    user: UserIdentity


class ProfileOut(ProgressResponse):
    name: str
    email: str
    quiz_history: List[QuizAttemptResponse] = Field(default_factory=list)


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    user: ProfileOut
