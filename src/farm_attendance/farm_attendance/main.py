from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .time_categories.repository import TimeCategoryRepository

logger = logging.getLogger(__name__)

SETTING_NAMES = (
    "DEBUG",
    "LOG_LEVEL",
    "DEFAULT_CATEGORY_COLOR",
    "DEFAULT_PAY_MULTIPLIER",
    "SEED_DEFAULT_CATEGORIES",
)


def load_settings() -> dict[str, Any]:
    load_dotenv(override=False)
    module_name = get_settings_module()
    settings = importlib.import_module(module_name)
    values = {name: getattr(settings, name) for name in SETTING_NAMES if hasattr(settings, name)}
    values["SETTINGS_MODULE"] = module_name
    return values


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def bootstrap(*, categories_repo: Optional[TimeCategoryRepository] = None) -> Container:
    settings = load_settings()
    configure_logging(settings.get("LOG_LEVEL", "INFO"))

    if settings.get("DEBUG"):
        logger.debug("[farm-attendance] settings=%s", settings["SETTINGS_MODULE"])

    container = build_container(settings=settings, categories_repo=categories_repo)

    if settings.get("SEED_DEFAULT_CATEGORIES"):
        created = container.time_category_service.seed_default_categories()
        logger.info("[farm-attendance] seeded %d default time categories", len(created))

    return container
