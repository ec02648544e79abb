"""
Run the API with uvicorn: ``python -m hostelcare``.
"""

import uvicorn

from hostelcare.config.settings import settings


def main() -> None:
    uvicorn.run(
        "hostelcare.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development() and settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    main()
