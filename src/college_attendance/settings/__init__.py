import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, defaulting to development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "college_attendance.settings.production"

    if env in {"test", "testing"}:
        return "college_attendance.settings.testing"

    return "college_attendance.settings.development"
