import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JSON_SORT_KEYS = False

    # Comma-separated list
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Simulated submission: wait before reporting success, then reset the
    # form and hide the notice on their own timers.
    SUBMISSION_DELAY_SECONDS = float(os.getenv("SUBMISSION_DELAY_SECONDS", "2"))
    SUCCESS_RESET_SECONDS = float(os.getenv("SUCCESS_RESET_SECONDS", "3"))
    SUCCESS_NOTICE_SECONDS = float(os.getenv("SUCCESS_NOTICE_SECONDS", "5"))


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SUBMISSION_DELAY_SECONDS = 0.0
