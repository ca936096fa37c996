"""Validation of inbound food payloads."""

import math

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from food_catalog.domain.errors import ValidationError

_NON_NULLABLE_PATCH_FIELDS = (
    "food_item_name",
    "food_group",
    "ingredients",
    "serving_size",
    "certifications",
    "health_benefits",
    "country_of_origin",
    "preparation_methods",
    "dietary_restrictions",
    "brand_or_manufacturer",
    "nutritional_information",
)


class NutritionalInformationModel(BaseModel):
    """Macronutrient values; every sub-field is required and finite."""

    model_config = ConfigDict(allow_inf_nan=False)

    fat: int | float
    fiber: int | float
    protein: int | float
    calories: int | float
    carbohydrates: int | float

    @field_validator("*", mode="before")
    @classmethod
    def _require_number(cls, value: object) -> object:
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValueError("Input should be a number")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("Input should be a finite number")
        return value


class FoodDraft(BaseModel):
    """A complete food payload accepted for creation.

    Unknown keys, including a caller-supplied ``id``, are dropped.
    """

    food_item_name: StrictStr
    food_group: StrictStr
    description: StrictStr | None = None
    ingredients: list[StrictStr]
    serving_size: StrictStr
    certifications: list[StrictStr]
    health_benefits: list[StrictStr]
    country_of_origin: StrictStr
    preparation_methods: list[StrictStr]
    dietary_restrictions: list[StrictStr]
    brand_or_manufacturer: StrictStr
    nutritional_information: NutritionalInformationModel


class FoodPatch(BaseModel):
    """A partial food payload accepted for updates."""

    food_item_name: StrictStr | None = None
    food_group: StrictStr | None = None
    description: StrictStr | None = None
    ingredients: list[StrictStr] | None = None
    serving_size: StrictStr | None = None
    certifications: list[StrictStr] | None = None
    health_benefits: list[StrictStr] | None = None
    country_of_origin: StrictStr | None = None
    preparation_methods: list[StrictStr] | None = None
    dietary_restrictions: list[StrictStr] | None = None
    brand_or_manufacturer: StrictStr | None = None
    nutritional_information: NutritionalInformationModel | None = None

    @field_validator(*_NON_NULLABLE_PATCH_FIELDS, mode="before")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("Field cannot be null")
        return value


def validate_new_food(payload: object) -> FoodDraft:
    """Validate a create payload, raising ValidationError on failure."""
    _require_object(payload)
    try:
        return FoodDraft.model_validate(payload)
    except PydanticValidationError as exc:
        raise _to_validation_error(exc) from exc


def validate_food_patch(payload: object) -> dict[str, object]:
    """Validate an update payload and return only the fields it sets."""
    _require_object(payload)
    try:
        patch = FoodPatch.model_validate(payload)
    except PydanticValidationError as exc:
        raise _to_validation_error(exc) from exc
    return patch.model_dump(exclude_unset=True)


def _require_object(payload: object) -> None:
    if not isinstance(payload, dict):
        raise ValidationError(
            "Food validation failed: body: Input should be a JSON object",
            fields=("body",),
        )


def _to_validation_error(exc: PydanticValidationError) -> ValidationError:
    """Collapse pydantic errors into a single message naming each field."""
    fields: list[str] = []
    reasons: list[str] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        if field in fields:
            continue
        fields.append(field)
        reasons.append(f"{field}: {error['msg']}")
    message = "Food validation failed: " + ", ".join(reasons)
    return ValidationError(message, fields=tuple(fields))
