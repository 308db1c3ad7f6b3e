import hashlib
import hmac
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    api_key_hash: str = ""  # SHA-256 hash of the API key
    log_level: str = "INFO"
    log_dir: str = "/var/log/plcalendar"

    # First day of the calendar week (Monday = 0, Sunday = 6)
    week_start_day: int = Field(default=6, ge=0, le=6)

    # Withdrawal simulator defaults
    default_starting_balance: float = 100_000.0
    default_withdrawal_pct: float = 0.3
    default_withdraw_only_if_profitable: bool = True

    model_config = {"env_prefix": "PLC_", "env_file": ".env", "frozen": False}

    def verify_api_key(self, key: str) -> bool:
        if not self.api_key_hash:
            return False
        incoming_hash = hashlib.sha256(key.encode()).hexdigest()
        return hmac.compare_digest(incoming_hash, self.api_key_hash)


settings = Settings()
