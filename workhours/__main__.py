"""Run the API with uvicorn: ``python -m workhours``."""

import uvicorn

from .core import HOST, LOG_LEVEL, PORT, RELOAD


def main() -> None:
    uvicorn.run(
        "workhours.app:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
