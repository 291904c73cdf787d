from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "HireMe Marketplace"
    API_PREFIX: str = "/api"
    
    # Server
    PORT: int = 8000
    ENVIRONMENT: str = "development"
    
    # Supabase
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    
    # Storage
    STORAGE_BUCKET: str = "photos"
    SIGNED_URL_TTL: int = 3600
    
    # Marketplace catalog (categories, photo limits)
    MARKETPLACE_CONFIG_PATH: str = "data/marketplace_config.json"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
