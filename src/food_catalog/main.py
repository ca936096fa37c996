"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from food_catalog.config import Settings


def main() -> None:
    """Serve the food catalog API on the configured host and port."""
    settings = Settings()
    print(f"Food Catalog listening on {settings.host}:{settings.port}")  # noqa: T201
    uvicorn.run("food_catalog.api.asgi:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
