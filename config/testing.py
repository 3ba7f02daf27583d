DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DEFAULT_CATEGORY_COLOR = "#007bff"
DEFAULT_PAY_MULTIPLIER = 1.0

SEED_DEFAULT_CATEGORIES = False
