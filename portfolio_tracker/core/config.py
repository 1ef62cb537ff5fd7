import os
from dotenv import load_dotenv

load_dotenv()  # Loads variables from .env when present

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./portfolio.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_PORTFOLIO_NAME = "My Portfolio"
AUTH_ENTRY_URL = "/auth"
DASHBOARD_URL = "/dashboard"
