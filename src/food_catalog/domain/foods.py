"""Domain models for food nutrition records."""

from dataclasses import asdict, dataclass
from uuid import UUID


@dataclass(frozen=True)
class NutritionalInformation:
    """Macronutrient breakdown attached to a food record."""

    fat: float
    fiber: float
    protein: float
    calories: float
    carbohydrates: float


@dataclass(frozen=True)
class FoodRecord:
    """Represents a stored food record."""

    id: UUID
    food_item_name: str
    food_group: str
    description: str | None
    ingredients: list[str]
    serving_size: str
    certifications: list[str]
    health_benefits: list[str]
    country_of_origin: str
    preparation_methods: list[str]
    dietary_restrictions: list[str]
    brand_or_manufacturer: str
    nutritional_information: NutritionalInformation

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation of the record."""
        data = asdict(self)
        data["id"] = str(self.id)
        return data
