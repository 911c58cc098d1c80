from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "docanalysis"
    db_username: str = "docanalysis"
    db_password: str = "secret"
    db_pool_max_size: int = 10

    max_job_attempts: int = 3
    job_poll_interval_seconds: int = 5
    job_visibility_timeout_seconds: int = 300
    worker_concurrency: int = 1

    pdf_engine: str = "pdfplumber"
    max_upload_bytes: int = 5 * 1024 * 1024

    storage_backend: str = "local"
    storage_local_root: str = "./files"
    storage_s3_bucket: str = "documents"
    storage_s3_region: str | None = None
    storage_s3_endpoint_url: str | None = None
    storage_s3_access_key_id: str | None = None
    storage_s3_secret_access_key: str | None = None

    llm_provider: str = "openrouter"
    llm_api_key: str = ""
    llm_model_name: str = "openai/gpt-3.5-turbo"
    llm_base_url: str | None = None
    llm_timeout_seconds: int = 30
    llm_temperature: float = 0.0

    analysis_max_text_chars: int = 10_000
