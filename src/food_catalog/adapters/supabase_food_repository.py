"""Supabase implementation for food record persistence."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID

import httpx
from supabase import Client, PostgrestAPIError

from food_catalog.domain.errors import StorageUnavailableError
from food_catalog.domain.foods import FoodRecord, NutritionalInformation
from food_catalog.services.foods import FoodRepository

_COLUMNS = (
    "id, food_item_name, food_group, description, ingredients, serving_size, "
    "certifications, health_benefits, country_of_origin, preparation_methods, "
    "dietary_restrictions, brand_or_manufacturer, nutritional_information"
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for food records."""

    client: Client
    table: str = "foods"

    def create_food(self, payload: dict[str, object]) -> FoodRecord:
        """Insert a food row and return it."""
        response = self._execute(
            "create_food",
            lambda: self.client.table(self.table).insert(payload).execute(),
        )
        if not response.data:
            raise StorageUnavailableError("Failed to create food item")
        return _parse_food(response.data[0])

    def list_foods(self) -> list[FoodRecord]:
        """Return all food rows ordered by creation time."""
        response = self._execute(
            "list_foods",
            lambda: (
                self.client.table(self.table)
                .select(_COLUMNS)
                .order("created_at")
                .order("id")
                .execute()
            ),
        )
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> FoodRecord | None:
        """Return a food row by id, if present."""
        response = self._execute(
            "get_food",
            lambda: (
                self.client.table(self.table)
                .select(_COLUMNS)
                .eq("id", str(food_id))
                .limit(1)
                .execute()
            ),
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def find_food_by_name(self, name: str) -> FoodRecord | None:
        """Return the earliest food row with an exactly matching name."""
        response = self._execute(
            "find_food_by_name",
            lambda: (
                self.client.table(self.table)
                .select(_COLUMNS)
                .eq("food_item_name", name)
                .order("created_at")
                .order("id")
                .limit(1)
                .execute()
            ),
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def update_food(
        self, food_id: UUID, payload: dict[str, object]
    ) -> FoodRecord | None:
        """Update a food row and return the post-update state."""
        response = self._execute(
            "update_food",
            lambda: (
                self.client.table(self.table)
                .update(payload)
                .eq("id", str(food_id))
                .execute()
            ),
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def delete_food(self, food_id: UUID) -> bool:
        """Delete a food row, returning whether one was removed."""
        response = self._execute(
            "delete_food",
            lambda: (
                self.client.table(self.table).delete().eq("id", str(food_id)).execute()
            ),
        )
        return bool(response.data)

    def ping(self) -> None:
        """Issue a minimal query against the foods table."""
        self._execute(
            "ping",
            lambda: self.client.table(self.table).select("id").limit(1).execute(),
        )

    def _execute(self, operation: str, query: Callable[[], T]) -> T:
        try:
            return query()
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            logger.exception(
                "Supabase query failed",
                extra={"operation": operation, "table": self.table},
            )
            detail = getattr(exc, "message", None) or str(exc)
            raise StorageUnavailableError(f"Storage unavailable: {detail}") from exc


def _parse_food(row: dict[str, object]) -> FoodRecord:
    """Parse a food row into a domain model."""
    try:
        nutrition = row["nutritional_information"]
        return FoodRecord(
            id=UUID(str(row["id"])),
            food_item_name=row["food_item_name"],
            food_group=row["food_group"],
            description=row.get("description"),
            ingredients=list(row["ingredients"]),
            serving_size=row["serving_size"],
            certifications=list(row["certifications"]),
            health_benefits=list(row["health_benefits"]),
            country_of_origin=row["country_of_origin"],
            preparation_methods=list(row["preparation_methods"]),
            dietary_restrictions=list(row["dietary_restrictions"]),
            brand_or_manufacturer=row["brand_or_manufacturer"],
            nutritional_information=NutritionalInformation(
                fat=nutrition["fat"],
                fiber=nutrition["fiber"],
                protein=nutrition["protein"],
                calories=nutrition["calories"],
                carbohydrates=nutrition["carbohydrates"],
            ),
        )
    except (KeyError, TypeError, ValueError) as exc:
        logger.exception("Malformed food row", extra={"food_id": row.get("id")})
        raise StorageUnavailableError(f"Malformed food row: {exc!r}") from exc
