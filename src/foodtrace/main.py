"""Entry point for running the admin front-end."""

import uvicorn

from foodtrace.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "foodtrace.web.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=3000,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
