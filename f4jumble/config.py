from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .cipher.params import MAX_LEN_M, MIN_LEN_M


class Settings(BaseModel):
    # Reproducibility
    global_seed: int = Field(default=1337)

    # Evaluation
    roundtrip_vectors: int = Field(default=200, ge=1)
    avalanche_trials: int = Field(default=100, ge=1)
    max_sample_len: int = Field(default=4096, ge=MIN_LEN_M, le=MAX_LEN_M)

    # Logging
    log_level: str = Field(default="INFO")

    # Paths
    runs_dir: str = Field(default="runs")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        roundtrip_vectors=int(os.getenv("F4JUMBLE_ROUNDTRIP_VECTORS", "200")),
        avalanche_trials=int(os.getenv("F4JUMBLE_AVALANCHE_TRIALS", "100")),
        max_sample_len=int(os.getenv("F4JUMBLE_MAX_SAMPLE_LEN", "4096")),
        log_level=os.getenv("F4JUMBLE_LOG_LEVEL", "INFO").upper(),
        runs_dir=os.getenv("F4JUMBLE_RUNS_DIR", "runs"),
    )


def with_overrides(settings: Settings, **overrides) -> Settings:
    """Return a copy of ``settings`` with ``overrides`` applied and validated."""
    return Settings(**{**settings.model_dump(), **overrides})
