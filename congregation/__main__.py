"""`python -m congregation` — serve the API with uvicorn on the configured address."""

import uvicorn

from congregation.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "congregation.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
