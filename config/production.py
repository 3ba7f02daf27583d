from .config import Config

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

DEFAULT_CATEGORY_COLOR = Config.DEFAULT_CATEGORY_COLOR
DEFAULT_PAY_MULTIPLIER = Config.DEFAULT_PAY_MULTIPLIER

SEED_DEFAULT_CATEGORIES = Config.SEED_DEFAULT_CATEGORIES
