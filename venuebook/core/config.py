from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

"""
API CONFIGURATION
"""


#Class to load and read backend .env
class Settings(BaseSettings):

    FRONTEND_URL: str = "http://localhost:5173"

    JWT_SECRET_KEY: str = Field(...)

    #Seeded administrator account
    ADMIN_NAME: str = "Admin"
    ADMIN_EMAIL: str = "admin@venuebook.local"
    ADMIN_PASSWORD: str = Field(...)

    #Brevo is optional, notifications are skipped without a key
    BREVO_API_KEY: str | None = None
    NOTIFY_EMAIL: str = "bookings@venuebook.local"

    DATABASE_URL: str = "sqlite:///./dev.db"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()


#Login sessions last a week, matching the client session cookie
SESSION_LIFETIME_DAYS = 7


#Frontend origins allowed through CORS
CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    settings.FRONTEND_URL,
]


#Public route rate limits (max requests, window seconds)
RATE_LIMITS = {
    "login": (5, 60),
    "booking": (5, 600),
    "contact": (5, 600),
}
