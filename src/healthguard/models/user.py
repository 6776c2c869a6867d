"""User profile model."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Gender(str, Enum):
    """Self-reported gender."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"
    PREFER_NOT_TO_SAY = "PreferNotToSay"


class User(BaseModel):
    """The person using the dashboard."""
    
    id: str
    name: str
    email: str
    gender: Gender = Gender.PREFER_NOT_TO_SAY
    coins: int = Field(default=0, ge=0)
    is_pro: bool = False
    trusted_contact: Optional[str] = None
    
    @classmethod
    def guest(cls) -> "User":
        """The profile created by the welcome screen's start button."""
        return cls(
            id="guest",
            name="Wellness Explorer",
            email="guest@healthguard.ai",
            gender=Gender.PREFER_NOT_TO_SAY,
            coins=0,
            is_pro=True,
        )
    
    @property
    def first_name(self) -> str:
        parts = self.name.split()
        return parts[0] if parts else self.name
    
    @property
    def initial(self) -> str:
        return self.name[:1].upper()
    
    def add_coins(self, amount: int) -> None:
        """Add reward coins. Balance never drops below zero."""
        self.coins = max(0, self.coins + amount)
