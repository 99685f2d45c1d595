"""Articles API entrypoint.

Run with:
  python -m articles_api
"""

import uvicorn

from articles_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "articles_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
