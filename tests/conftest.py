"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from uuid import UUID, uuid4

import pytest

from food_catalog.config import Settings
from food_catalog.containers import AppContainer
from food_catalog.domain.errors import StorageUnavailableError
from food_catalog.domain.foods import FoodRecord, NutritionalInformation
from food_catalog.services.foods import FoodRepository, FoodService

# Syntactically valid JWT-shaped key so supabase accepts it offline.
TEST_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)


def almond_milk_payload() -> dict[str, object]:
    return {
        "food_item_name": "Almond Milk",
        "food_group": "Beverage",
        "ingredients": ["almonds", "water"],
        "serving_size": "240ml",
        "certifications": ["organic"],
        "health_benefits": ["low calorie"],
        "country_of_origin": "USA",
        "preparation_methods": ["blended"],
        "dietary_restrictions": ["vegan"],
        "brand_or_manufacturer": "Acme",
        "nutritional_information": {
            "fat": 2.5,
            "fiber": 1,
            "protein": 1,
            "calories": 40,
            "carbohydrates": 7,
        },
    }


def _nutrition(value: dict[str, object]) -> NutritionalInformation:
    return NutritionalInformation(
        fat=value["fat"],
        fiber=value["fiber"],
        protein=value["protein"],
        calories=value["calories"],
        carbohydrates=value["carbohydrates"],
    )


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: dict[UUID, FoodRecord] = field(default_factory=dict)
    available: bool = True

    def create_food(self, payload: dict[str, object]) -> FoodRecord:
        self._check()
        food = FoodRecord(
            id=uuid4(),
            food_item_name=payload["food_item_name"],
            food_group=payload["food_group"],
            description=payload.get("description"),
            ingredients=list(payload["ingredients"]),
            serving_size=payload["serving_size"],
            certifications=list(payload["certifications"]),
            health_benefits=list(payload["health_benefits"]),
            country_of_origin=payload["country_of_origin"],
            preparation_methods=list(payload["preparation_methods"]),
            dietary_restrictions=list(payload["dietary_restrictions"]),
            brand_or_manufacturer=payload["brand_or_manufacturer"],
            nutritional_information=_nutrition(payload["nutritional_information"]),
        )
        self.foods[food.id] = food
        return food

    def list_foods(self) -> list[FoodRecord]:
        self._check()
        return list(self.foods.values())

    def get_food(self, food_id: UUID) -> FoodRecord | None:
        self._check()
        return self.foods.get(food_id)

    def find_food_by_name(self, name: str) -> FoodRecord | None:
        self._check()
        for food in self.foods.values():
            if food.food_item_name == name:
                return food
        return None

    def update_food(
        self, food_id: UUID, payload: dict[str, object]
    ) -> FoodRecord | None:
        self._check()
        current = self.foods.get(food_id)
        if current is None:
            return None
        changes = dict(payload)
        if "nutritional_information" in changes:
            changes["nutritional_information"] = _nutrition(
                changes["nutritional_information"]
            )
        updated = replace(current, **changes)
        self.foods[food_id] = updated
        return updated

    def delete_food(self, food_id: UUID) -> bool:
        self._check()
        return self.foods.pop(food_id, None) is not None

    def ping(self) -> None:
        self._check()

    def _check(self) -> None:
        if not self.available:
            raise StorageUnavailableError("Storage unavailable: connection refused")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=TEST_SERVICE_KEY,
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def food_service(food_repository: InMemoryFoodRepository) -> FoodService:
    return FoodService(food_repository)


@pytest.fixture
def payload() -> dict[str, object]:
    return almond_milk_payload()


@pytest.fixture
def container(settings: Settings, food_service: FoodService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_service=food_service,
        close_resources=close_resources,
    )
