"""
Run the API with uvicorn: `python -m retroapi`.

Host and port come from HOST and PORT (defaults 0.0.0.0:8080).
"""

import uvicorn

from retroapi.config import settings


def main() -> None:
    uvicorn.run(
        "retroapi.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
