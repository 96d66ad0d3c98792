import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("LIBDESK_APP_NAME", "LibDesk")

    # Logging
    log_level: str = os.getenv("LIBDESK_LOG_LEVEL", "INFO")
    log_format: str = os.getenv(
        "LIBDESK_LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Identifiers: first value handed out by every id counter
    first_id: int = int(os.getenv("LIBDESK_FIRST_ID", "1"))


settings = Settings()


def configure_logging(cfg: Optional[Settings] = None) -> None:
    """Set up root logging for scripts; the package itself never calls this."""
    cfg = cfg or settings
    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format=cfg.log_format,
    )
