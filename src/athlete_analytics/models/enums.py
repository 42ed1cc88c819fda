"""Shared enums for models."""

from enum import Enum


class Role(str, Enum):
    """Global account role carried in the session token."""

    ADMIN = "admin"
    COACH = "coach"
    MANAGER = "manager"
    ATHLETE = "athlete"


class TeamRole(str, Enum):
    """Per-team role stored on the membership row."""

    CAPTAIN = "captain"
    CO_CAPTAIN = "co-captain"
    MEMBER = "member"
    COACH = "coach"
    MANAGER = "manager"


class GameResult(str, Enum):
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


class ScheduleType(str, Enum):
    GAME = "game"
    ACTIVITY = "activity"
    SESSION = "session"
