from pydantic_settings import BaseSettings
from dotenv import load_dotenv
import os

load_dotenv()

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./project_tracker.db")
    
    # JWT (jwtPrivateKey is the name older deployments export)
    SECRET_KEY: str = os.getenv("SECRET_KEY", os.getenv("jwtPrivateKey", ""))
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))
    
    # App
    APP_NAME: str = os.getenv("APP_NAME", "Project Tracker API")
    DEBUG: bool = os.getenv("DEBUG", "True") == "True"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "text")

settings = Settings()
