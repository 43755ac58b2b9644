from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # memory | file | sql
    storage_backend: str = "sql"
    storage_url: str = "sqlite:///./docmanagement.db"
    storage_path: str = "./.docmanagement"
    storage_prefix: str = "docManagement"

    # Множитель искусственной задержки, 0 отключает ожидание
    latency_scale: float = 1.0

    avatar_base_url: str = "https://api.dicebear.com/7.x/avataaars/svg"
    verify_passwords: bool = False
    max_upload_bytes: int = 10 * 1024 * 1024

    model_config = {"env_file": ".env", "env_prefix": "DOCMGMT_", "extra": "ignore"}

settings = Settings()
