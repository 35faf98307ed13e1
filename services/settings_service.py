import logging

from sqlalchemy.orm import Session

from domain.schemas import UserSettings, UserSettingsUpdate
from repositories import SettingsRepository, clear_all_data

logger = logging.getLogger("platepilot.settings")


class SettingsService:
    """Reads and updates the budget/calorie preferences."""

    def __init__(self, db: Session):
        self.db = db
        self.repository = SettingsRepository(db)

    def get_settings(self) -> UserSettings:
        return self.repository.load()

    def update_settings(self, changes: UserSettingsUpdate) -> UserSettings:
        """Apply the fields set in ``changes``; others keep their stored value."""
        current = self.repository.load()
        updates = changes.model_dump(exclude_unset=True, exclude_none=True)
        updated = UserSettings(**{**current.model_dump(include=set(UserSettings.model_fields)), **updates})
        self.repository.save(updated)
        logger.info("Updated settings: %s", ", ".join(sorted(updates)) or "no changes")
        return updated

    def reset_settings(self) -> UserSettings:
        self.repository.clear()
        logger.info("Settings reset to defaults")
        return UserSettings()

    def clear_all_data(self) -> int:
        """Wipe favorites, planner, grocery list and settings."""
        return clear_all_data(self.db)
