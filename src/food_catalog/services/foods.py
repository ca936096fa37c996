"""Record store operations for food items."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from food_catalog.domain.errors import NotFoundError
from food_catalog.domain.foods import FoodRecord
from food_catalog.services.validation import validate_food_patch, validate_new_food

NOT_FOUND_MESSAGE = "Food item not found"
DELETED_MESSAGE = "Food item deleted successfully"

logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for food records."""

    def create_food(self, payload: dict[str, object]) -> FoodRecord:
        """Insert a validated payload and return the stored record."""

    def list_foods(self) -> list[FoodRecord]:
        """Return every stored record in insertion order."""

    def get_food(self, food_id: UUID) -> FoodRecord | None:
        """Return a record by id, if present."""

    def find_food_by_name(self, name: str) -> FoodRecord | None:
        """Return the first record whose food_item_name equals name."""

    def update_food(
        self, food_id: UUID, payload: dict[str, object]
    ) -> FoodRecord | None:
        """Overwrite the given fields and return the updated record."""

    def delete_food(self, food_id: UUID) -> bool:
        """Delete a record by id and report whether it existed."""

    def ping(self) -> None:
        """Raise when the storage backend cannot be reached."""


def parse_food_id(key: str) -> UUID | None:
    """Return the key as a food id, or None when it is not id-shaped."""
    try:
        return UUID(key)
    except ValueError:
        return None


@dataclass
class FoodService:
    """Application service for food record operations."""

    repository: FoodRepository

    def create(self, payload: object) -> FoodRecord:
        """Validate and store a new food record."""
        draft = validate_new_food(payload)
        food = self.repository.create_food(draft.model_dump())
        logger.info("Food created", extra={"food_id": str(food.id)})
        return food

    def list_all(self) -> list[FoodRecord]:
        """Return all stored food records."""
        return self.repository.list_foods()

    def get_by_id(self, food_id: UUID) -> FoodRecord:
        """Return the record with the given id."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return food

    def get_by_name(self, name: str) -> FoodRecord:
        """Return the first record with the given food_item_name."""
        food = self.repository.find_food_by_name(name)
        if food is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return food

    def update_by_id(self, food_id: UUID, payload: object) -> FoodRecord:
        """Merge the payload into the record with the given id."""
        changes = validate_food_patch(payload)
        if not changes:
            return self.get_by_id(food_id)
        food = self.repository.update_food(food_id, changes)
        if food is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info(
            "Food updated",
            extra={"food_id": str(food.id), "fields": sorted(changes)},
        )
        return food

    def update_by_name(self, name: str, payload: object) -> FoodRecord:
        """Merge the payload into the first record with the given name."""
        changes = validate_food_patch(payload)
        current = self.get_by_name(name)
        if not changes:
            return current
        return self.update_by_id(current.id, changes)

    def delete_by_id(self, food_id: UUID) -> str:
        """Delete the record with the given id."""
        if not self.repository.delete_food(food_id):
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("Food deleted", extra={"food_id": str(food_id)})
        return DELETED_MESSAGE

    def delete_by_name(self, name: str) -> str:
        """Delete the first record with the given name."""
        current = self.get_by_name(name)
        return self.delete_by_id(current.id)

    def get_food(self, key: str) -> FoodRecord:
        """Look a record up by id when the key parses as one, else by name."""
        food_id = parse_food_id(key)
        if food_id is not None:
            return self.get_by_id(food_id)
        return self.get_by_name(key)

    def update_food(self, key: str, payload: object) -> FoodRecord:
        """Update a record addressed by id or name."""
        food_id = parse_food_id(key)
        if food_id is not None:
            return self.update_by_id(food_id, payload)
        return self.update_by_name(key, payload)

    def delete_food(self, key: str) -> str:
        """Delete a record addressed by id or name."""
        food_id = parse_food_id(key)
        if food_id is not None:
            return self.delete_by_id(food_id)
        return self.delete_by_name(key)

    def check_storage(self) -> None:
        """Verify the storage backend is reachable."""
        self.repository.ping()
