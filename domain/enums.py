"""
Domain enums for PlatePilot.
"""

import enum
from datetime import date


class DayOfWeek(str, enum.Enum):
    """Days a meal can be planned on, in calendar order starting Monday"""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def short_name(self) -> str:
        return self.value[:3]

    @property
    def order(self) -> int:
        return list(DayOfWeek).index(self)

    @classmethod
    def from_date(cls, value: date) -> "DayOfWeek":
        # date.weekday(): Monday == 0
        return list(cls)[value.weekday()]

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None
