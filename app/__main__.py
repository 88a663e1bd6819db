"""Run the API with uvicorn: python -m app."""

import uvicorn

from app.core.config import get_settings


def main() -> None:
    """Serve app.main:app on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
