"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.routers import products, review
from app.services.review import build_normalizer

logger = logging.getLogger(__name__)


def _check_matching_config() -> None:
    """Compile configured prefix rules at process start so bad regexes fail fast."""

    settings = get_settings()
    try:
        build_normalizer(settings)
    except Exception:
        logger.exception(
            "product_matching.invalid_prefix_patterns patterns=%r",
            settings.product_name_prefix_patterns,
        )
        raise
    logger.info(
        "product_matching.config threshold=%.2f mode=%s isolate_empty_names=%s custom_prefix_rules=%d",
        settings.product_grouping_threshold,
        settings.product_grouping_mode,
        settings.product_grouping_isolate_empty_names,
        len(settings.product_name_prefix_patterns),
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    _check_matching_config()
    yield


settings = get_settings()
app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(products.router, tags=["products"])
app.include_router(review.router, tags=["review"])


@app.get("/health")
def health() -> dict[str, str]:
    """Simple health check endpoint."""

    return {"status": "ok"}
