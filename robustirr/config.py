from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "ROBUSTIRR_"}

    # App
    log_level: str = "INFO"
    api_title: str = "Robust IRR"
    api_version: str = "0.1.0"

    # Brent refinement (classic cash flows only)
    brent_xtol: float = 1e-12
    brent_rtol: float = 8.9e-16
    brent_maxiter: int = 500

    # Residual NPV above this is logged when reporting a solution
    npv_tolerance: float = 1e-6


settings = Settings()
