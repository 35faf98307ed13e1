from typing import Optional

from pydantic import BaseModel, Field, computed_field


class UserSettings(BaseModel):
    """Budget and calorie preferences"""

    weekly_budget: float = Field(default=50.0, ge=0)
    calorie_goal: int = Field(default=2000, ge=0)
    notifications_enabled: bool = False

    @computed_field
    @property
    def weekly_budget_text(self) -> str:
        return f"${self.weekly_budget:.2f}"

    @computed_field
    @property
    def calorie_goal_text(self) -> str:
        return f"{self.calorie_goal} cal/day"


class UserSettingsUpdate(BaseModel):
    """Partial update; omitted fields keep their stored value"""

    weekly_budget: Optional[float] = Field(default=None, ge=0)
    calorie_goal: Optional[int] = Field(default=None, ge=0)
    notifications_enabled: Optional[bool] = None
