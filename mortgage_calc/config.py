from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    # Default calculator inputs
    default_loan_amount: float = 300000
    default_annual_rate: float = 6.5  # percent
    default_years: int = 30

    # Input bounds (inclusive)
    min_loan_amount: float = 1000
    max_loan_amount: float = 10000000
    min_annual_rate: float = 0
    max_annual_rate: float = 25
    min_years: int = 1
    max_years: int = 40


settings = Settings()
