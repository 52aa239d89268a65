"""Run the API with uvicorn on the configured host and port."""

import uvicorn

from restaurantes_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "restaurantes_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
