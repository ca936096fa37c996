"""Food record API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Request, status

from food_catalog.services.foods import FoodService  # noqa: TC001

if TYPE_CHECKING:
    from food_catalog.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


def get_food_service(request: Request) -> FoodService:
    """Return the food service held by the app container."""
    container: AppContainer = request.app.state.container
    return container.food_service


@router.post("", status_code=status.HTTP_201_CREATED)
def create_food(
    payload: Any = Body(),  # noqa: ANN401
    service: FoodService = Depends(get_food_service),
) -> dict[str, object]:
    """Create a food record from a JSON body."""
    return service.create(payload).to_dict()


@router.get("")
def list_foods(
    service: FoodService = Depends(get_food_service),
) -> list[dict[str, object]]:
    """Return every stored food record."""
    return [food.to_dict() for food in service.list_all()]


@router.get("/{key}")
def get_food(
    key: str, service: FoodService = Depends(get_food_service)
) -> dict[str, object]:
    """Return a food record by id, or by name when the key is not an id."""
    return service.get_food(key).to_dict()


@router.put("/{key}")
def update_food(
    key: str,
    payload: Any = Body(),  # noqa: ANN401
    service: FoodService = Depends(get_food_service),
) -> dict[str, object]:
    """Merge the JSON body into a food record addressed by id or name."""
    return service.update_food(key, payload).to_dict()


@router.delete("/{key}")
def delete_food(
    key: str, service: FoodService = Depends(get_food_service)
) -> dict[str, str]:
    """Delete a food record addressed by id or name."""
    return {"message": service.delete_food(key)}
