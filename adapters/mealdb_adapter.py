"""TheMealDB adapter: fetch recipes and reshape them into Meal records.

Responsibilities:
- search by name and fetch random meals over HTTP (httpx)
- flatten strIngredient1..20 / strMeasure1..20 into an ingredient list
- estimate calories, cost and cook time (the API provides none of them)
"""

from __future__ import annotations

import json
import logging
import random
import threading
import time
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from app.config import settings
from app.exceptions import ExternalServiceError
from domain.schemas.meal_schemas import Ingredient, Meal

logger = logging.getLogger("platepilot.mealdb")

MAX_INGREDIENTS = 20
TO_TASTE = "To taste"
NO_INSTRUCTIONS = "No instructions available."

_client: Optional[httpx.Client] = None
_rng = random.Random()
_resource_timeout: float = settings.mealdb_resource_timeout
_client_lock = threading.RLock()
_clock = time.monotonic


class MealDBError(ExternalServiceError):
    """Failure talking to TheMealDB. ``kind`` says which step failed."""

    INVALID_URL = "invalid_url"
    NETWORK = "network"
    INVALID_RESPONSE = "invalid_response"
    DECODING = "decoding"
    NO_DATA = "no_data"

    def __init__(self, kind: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details, code=f"MEALDB_{kind.upper()}")
        self.kind = kind

    @classmethod
    def invalid_url(cls, url: str) -> "MealDBError":
        return cls(cls.INVALID_URL, "Invalid URL", {"url": url})

    @classmethod
    def network(cls, error: Exception) -> "MealDBError":
        return cls(cls.NETWORK, f"Network error: {error}")

    @classmethod
    def invalid_response(cls, status_code: int) -> "MealDBError":
        return cls(cls.INVALID_RESPONSE, "Invalid response from server", {"status_code": status_code})

    @classmethod
    def decoding(cls, error: Exception | str) -> "MealDBError":
        return cls(cls.DECODING, f"Failed to decode data: {error}")

    @classmethod
    def no_data(cls) -> "MealDBError":
        return cls(cls.NO_DATA, "No data received")


# ------------------ Connection ------------------
def connect(
    base_url: Optional[str] = None,
    request_timeout: Optional[float] = None,
    resource_timeout: Optional[float] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> None:
    """Open the shared HTTP client. Replaces any client opened earlier."""
    global _client, _resource_timeout
    base_url = (base_url or settings.mealdb_base_url).rstrip("/")
    if not base_url.startswith(("http://", "https://")):
        raise MealDBError.invalid_url(base_url)

    request_timeout = request_timeout or settings.mealdb_request_timeout
    resource_timeout = resource_timeout or settings.mealdb_resource_timeout
    timeout = httpx.Timeout(
        min(request_timeout, resource_timeout),
        pool=resource_timeout,
    )
    with _client_lock:
        close()
        _client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)
        _resource_timeout = resource_timeout
    logger.info("TheMealDB client ready (%s)", base_url)


def close() -> None:
    """Close the shared HTTP client."""
    global _client
    with _client_lock:
        try:
            if _client is not None:
                _client.close()
                logger.info("TheMealDB client closed")
        finally:
            _client = None


def _get_client() -> httpx.Client:
    """Lazy init of the HTTP client from settings."""
    with _client_lock:
        if _client is None:
            connect()
        return _client


def _read_body(response: httpx.Response, deadline: float) -> bytes:
    # The per-phase httpx timeouts do not bound a body that keeps trickling in
    chunks: List[bytes] = []
    for chunk in response.iter_bytes():
        if _clock() > deadline:
            raise httpx.ReadTimeout(
                f"Resource timeout of {_resource_timeout:g}s exceeded",
                request=response.request,
            )
        chunks.append(chunk)
    return b"".join(chunks)


def _get_json(path: str, params: Optional[Dict[str, str]] = None) -> Any:
    client = _get_client()
    deadline = _clock() + _resource_timeout
    try:
        with client.stream("GET", path, params=params) as response:
            if not 200 <= response.status_code <= 299:
                logger.warning("TheMealDB %s returned HTTP %d", path, response.status_code)
                raise MealDBError.invalid_response(response.status_code)
            content = _read_body(response, deadline)
    except httpx.InvalidURL as e:
        raise MealDBError.invalid_url(f"{client.base_url}{path}") from e
    except httpx.HTTPError as e:
        logger.warning("TheMealDB request %s failed: %s", path, e)
        raise MealDBError.network(e) from e

    if not content:
        raise MealDBError.no_data()

    try:
        return json.loads(content)
    except ValueError as e:
        raise MealDBError.decoding(e) from e


# ------------------ Public API ------------------
def search_meals(query: str) -> List[Meal]:
    """Search meals by name. An unknown name yields an empty list."""
    payload = _get_json("/search.php", params={"s": query})
    meals = decode_meals(payload)
    logger.info("Search %r returned %d meals", query, len(meals))
    return meals


def fetch_random_meal() -> Meal:
    """Fetch one random meal."""
    meals = decode_meals(_get_json("/random.php"))
    if not meals:
        raise MealDBError.no_data()
    return meals[0]


def fetch_random_meals(count: Optional[int] = None) -> List[Meal]:
    """Fetch ``count`` random meals. Any failed fetch fails the whole batch.

    The API may return the same meal more than once; duplicates are kept.
    """
    if count is None:
        count = settings.random_batch_default
    meals: List[Meal] = []
    for _ in range(count):
        meals.append(fetch_random_meal())
    logger.info("Fetched %d random meals", len(meals))
    return meals


# ------------------ Response mapping ------------------
def decode_meals(payload: Any, rng: Optional[random.Random] = None) -> List[Meal]:
    """Convert a ``{"meals": [...] | null}`` document into Meal records."""
    if not isinstance(payload, dict):
        raise MealDBError.decoding("expected a JSON object")

    raw_meals = payload.get("meals")
    if raw_meals is None:
        return []
    if not isinstance(raw_meals, list):
        raise MealDBError.decoding("'meals' is not a list")

    return [convert_to_meal(raw, rng) for raw in raw_meals]


def convert_to_meal(raw: Dict[str, Any], rng: Optional[random.Random] = None) -> Meal:
    """
    Map one TheMealDB record to a Meal.

    Calories, cost and cook time are estimates: there is no nutrition source,
    so they are derived from the ingredient count plus a random spread.
    """
    if not isinstance(raw, dict):
        raise MealDBError.decoding("meal entry is not an object")

    meal_id = raw.get("idMeal")
    name = raw.get("strMeal")
    if not isinstance(meal_id, str) or not isinstance(name, str):
        raise MealDBError.decoding("meal entry is missing idMeal or strMeal")

    rng = rng or _rng
    ingredients = extract_ingredients(raw)
    count = len(ingredients)

    try:
        return Meal(
            id=meal_id,
            name=name,
            image_url=_optional_str(raw.get("strMealThumb")),
            instructions=_optional_str(raw.get("strInstructions")) or NO_INSTRUCTIONS,
            ingredients=ingredients,
            calories=count * 50 + rng.randint(100, 300),
            estimated_cost=count * 1.5 + rng.uniform(2, 8),
            cook_time_minutes=rng.randint(15, 60),
            is_favorite=False,
        )
    except ValidationError as e:
        raise MealDBError.decoding(e) from e


def extract_ingredients(raw: Dict[str, Any]) -> List[Ingredient]:
    """Pair strIngredientN with strMeasureN, skipping blank and "null" names."""
    ingredients: List[Ingredient] = []
    for i in range(1, MAX_INGREDIENTS + 1):
        name = _clean(raw.get(f"strIngredient{i}"))
        if not name or name.lower() == "null":
            continue
        measure = _clean(raw.get(f"strMeasure{i}"))
        if not measure or measure.lower() == "null":
            measure = TO_TASTE
        ingredients.append(Ingredient(name=name, quantity_description=measure))
    return ingredients


def _clean(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


def _optional_str(value: Any) -> Optional[str]:
    # Empty strings and non-strings count as absent
    return value if isinstance(value, str) and value else None
