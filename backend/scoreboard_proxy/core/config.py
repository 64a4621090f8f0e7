from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Scoreboard Proxy"
    SCORES_URL: str = "https://scoreboard.uscyberpatriot.org/api/image/scores.php"
    HISTORY_URL: str = "https://scoreboard.uscyberpatriot.org/api/image/chart.php"
    UPSTREAM_TIMEOUT: float = 30.0
    LOG_LEVEL: str = "INFO"

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
