from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Sem API_KEY a checagem do X-API-Key fica desligada
    API_KEY: Optional[str] = None
    DEFAULT_USER_ID: str = "default-user"

    HOST: str = "0.0.0.0"
    PORT: int = 4000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Credenciais do Firebase Admin, na ordem de prioridade em que são lidas
    FIREBASE_SERVICE_ACCOUNT: Optional[str] = None
    FIREBASE_SERVICE_ACCOUNT_BASE64: Optional[str] = None
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_CLIENT_EMAIL: Optional[str] = None
    FIREBASE_PRIVATE_KEY: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

settings = Settings()
