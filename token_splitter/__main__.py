"""Run the service: python -m token_splitter"""

import uvicorn

from token_splitter.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "token_splitter.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
