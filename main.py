import logging

import uvicorn

from predictor_backend.config import load_settings
from predictor_backend.main import create_app


def main():
    settings = load_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("predictor_backend")
    logger.info(f"Relaying predictions to {settings.ml_url}")
    if not settings.enable_extract_route:
        logger.info("POST /extract is disabled (set ENABLE_EXTRACT_ROUTE=true to expose it)")

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
