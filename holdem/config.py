"""Engine configuration."""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Config:
    """Engine defaults loaded from environment variables."""

    # Table
    hand_size: int = int(os.getenv("HAND_SIZE", "2"))
    max_players: int = int(os.getenv("MAX_PLAYERS", "8"))
    # Hard ceiling on seats so a 52-card supply cannot run dry
    seat_ceiling: int = int(os.getenv("SEAT_CEILING", "24"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


config = Config()
