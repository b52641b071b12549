# privachat/config.py
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", extra="allow")

    # Database
    database_url: str = "sqlite+aiosqlite:///privachat.db"
    database_echo: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = ["*"]
    static_dir: Optional[str] = None  # built front end, mounted at "/" when present

    # Rate limiting on /api (fixed window per client address)
    rate_limit_enabled: bool = True
    rate_limit_max_requests: int = 100
    rate_limit_window_seconds: int = 15 * 60

    # Stats
    allow_negative_increments: bool = False

    # Client side
    api_url: str = "http://localhost:3000/api"
    message_xp_reward: int = 5
    call_xp_reward: int = 10

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

settings = Settings()
