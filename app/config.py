from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Database
    DATABASE_URL: str

    # API
    API_TITLE: str = "IMUGOSSIP API"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Security
    SECRET_KEY: str
    SESSION_COOKIE_NAME: str = "imugossip_session"
    SESSION_EXPIRE_DAYS: int = 14
    SESSION_COOKIE_SECURE: bool = False

    # Uploads (served statically under /uploads)
    UPLOAD_DIR: str = "public/uploads"
    MAX_IMAGE_SIZE: int = 5 * 1024 * 1024
    # Files younger than this are left alone by the upload sweep (record may not be committed yet)
    UPLOAD_SWEEP_GRACE_SECONDS: int = 3600

    # Admin provisioning (python -m app.provision_admin)
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_USERNAME: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
