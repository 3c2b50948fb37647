"""Run the API with uvicorn: `python -m exercise_tracker`."""

import uvicorn

from exercise_tracker.config import get_settings


def main() -> None:
    settings = get_settings()
    # uvicorn reports the bound host:port on startup
    uvicorn.run(
        "exercise_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
