"""Runtime configuration with environment-variable overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _coerce(current: object, env_val: str) -> object:
    """Convert an environment string to the type of the field's default."""
    if isinstance(current, bool):
        return env_val.lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(env_val)
    if isinstance(current, Path):
        return Path(env_val)
    return env_val


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    # Defaults to BASE_DIR/data/words_eng.txt unless set in the environment.
    WORD_LIST_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 1
    MAX_RESULTS: int = 0  # 0 = unlimited
    STRICT_WORD_LIST: bool = False
    LOG_LEVEL: str = "WARNING"
    PORT: int = 10001

    def __post_init__(self) -> None:
        for fld in self.__dataclass_fields__:
            if fld == "WORD_LIST_PATH":
                continue
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))

        word_list = os.environ.get("WORD_LIST_PATH")
        self.WORD_LIST_PATH = (
            Path(word_list) if word_list is not None
            else self.BASE_DIR / "data" / "words_eng.txt"
        )


settings = Settings()
