from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    frontend_url: str = "http://localhost:3000"
    app_env: str = "development"

    # Duplicate detection
    similarity_threshold: float = 0.35
    max_similar_results: int = 3
    min_title_length: int = 5

    # Upper bound on documents accepted per check request
    max_corpus_documents: int = 5000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
