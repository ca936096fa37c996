"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import ClientOptions, create_client

from food_catalog.adapters.supabase_food_repository import SupabaseFoodRepository
from food_catalog.config import Settings
from food_catalog.services.foods import FoodService

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_service: FoodService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url,
        resolved_settings.supabase_service_key,
        options=ClientOptions(
            postgrest_client_timeout=resolved_settings.storage_timeout_seconds
        ),
    )
    food_repository = SupabaseFoodRepository(
        client=supabase_client, table=resolved_settings.foods_table
    )
    food_service = FoodService(food_repository)

    async def close_resources() -> None:
        logger.info(
            "Releasing storage client",
            extra={"table": resolved_settings.foods_table},
        )
        supabase_client.postgrest.aclose()

    return AppContainer(
        settings=resolved_settings,
        food_service=food_service,
        close_resources=close_resources,
    )
