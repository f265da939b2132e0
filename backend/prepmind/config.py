from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    DEBUG: bool = True
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./prepmind.db"

    # Gemini
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_MODEL: str = "gemini-2.0-flash-exp"
    AI_TIMEOUT_SECONDS: float = 60.0

    # Default generation parameters
    AI_TEMPERATURE: float = 0.7
    AI_MAX_OUTPUT_TOKENS: int = 2048
    AI_TOP_P: float = 0.95
    AI_TOP_K: int = 40

    # Code sandbox
    SANDBOX_NODE_BINARY: str = "node"
    SANDBOX_TIMEOUT_SECONDS: float = 5.0
    SANDBOX_MEMORY_LIMIT_MB: int = 256

    class Config:
        env_file = ".env"

settings = Settings()
