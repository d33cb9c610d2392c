from pydantic_settings import BaseSettings
from typing import Optional, List

class Settings(BaseSettings):
    PROJECT_NAME: str = "BnOverseas Platform"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    SECRET_KEY: str
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 2  # 2 days

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./overseas.db"
    TEST_DATABASE_URL: Optional[str] = None

    # Cache
    CACHE_ENABLED: bool = True
    CACHE_TTL: int = 300
    REDIS_URL: Optional[str] = None

    # Email
    SENDGRID_API_KEY: Optional[str] = None
    EMAILS_FROM_EMAIL: str = "no-reply@bnoverseas.com"
    EMAILS_FROM_NAME: str = "BnOverseas"

    # Public site, used to build links in emails and checkout metadata
    APP_URL: str = "http://localhost:3000"
    BRAND_NAME: str = "BnOverseas"
    BRAND_THEME_COLOR: str = "#E31E24"

    # Payments
    DEFAULT_CURRENCY: str = "INR"
    ENABLE_RAZORPAY: bool = True
    ENABLE_STRIPE: bool = False
    RAZORPAY_KEY_ID: Optional[str] = None
    RAZORPAY_KEY_SECRET: Optional[str] = None
    RAZORPAY_WEBHOOK_SECRET: Optional[str] = None
    RAZORPAY_API_URL: str = "https://api.razorpay.com/v1"
    STRIPE_SECRET_KEY: Optional[str] = None
    STRIPE_PUBLIC_KEY: Optional[str] = None
    STRIPE_WEBHOOK_SECRET: Optional[str] = None

    # Unenrolling is refused once a learner has gone past this much of a course
    UNENROLL_PROGRESS_LIMIT: int = 50

    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"

    @property
    def razorpay_enabled(self) -> bool:
        return self.ENABLE_RAZORPAY and bool(self.RAZORPAY_KEY_ID and self.RAZORPAY_KEY_SECRET)

    @property
    def stripe_enabled(self) -> bool:
        return self.ENABLE_STRIPE and bool(self.STRIPE_SECRET_KEY)

settings = Settings()
