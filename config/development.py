import os

from .config import Config, env_flag

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

DEFAULT_CATEGORY_COLOR = Config.DEFAULT_CATEGORY_COLOR
DEFAULT_PAY_MULTIPLIER = Config.DEFAULT_PAY_MULTIPLIER

# Dev helper: seed the suggested categories into an empty store
SEED_DEFAULT_CATEGORIES = env_flag("SEED_DEFAULT_CATEGORIES", "1")
