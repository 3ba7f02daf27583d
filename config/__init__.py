import os

def get_settings_module() -> str:
    # APP_ENV chọn module cấu hình, mặc định 'development'
    env = os.getenv("APP_ENV", "development").strip().lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
