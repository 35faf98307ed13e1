"""FastAPI dependencies shared by the routers"""

from typing import Iterator

from sqlalchemy.orm import Session

from domain.models import get_db_session


def get_db() -> Iterator[Session]:
    """One session per request, closed once the response is sent."""
    yield from get_db_session()
