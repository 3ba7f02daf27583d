import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


class Config:
    # Category defaults applied on create when the admin leaves a field empty
    DEFAULT_CATEGORY_COLOR = os.environ.get("DEFAULT_CATEGORY_COLOR", "#007bff")
    DEFAULT_PAY_MULTIPLIER = float(os.environ.get("DEFAULT_PAY_MULTIPLIER", "1.0"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Create Quarter/Half/Full Day, Overtime, Double Time on first start
    SEED_DEFAULT_CATEGORIES = env_flag("SEED_DEFAULT_CATEGORIES", "0")
