from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from src.athlete_analytics.schemas.user import UserBrief


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class LoginData(BaseModel):
    user: UserBrief
    token: str
    expires_at: datetime
