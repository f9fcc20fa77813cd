import logging
import os
from dataclasses import dataclass


@dataclass
class Settings:
    NORMALIZE_CASE: bool = True

    MAX_BOARD_CELLS: int = 400
    MAX_WORD_LENGTH: int = 64
    MAX_WORDS_PER_REQUEST: int = 100

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                if isinstance(current, bool):
                    setattr(self, fld, env_val.lower() in ("1", "true", "yes"))
                elif isinstance(current, int):
                    setattr(self, fld, int(env_val))
                else:
                    setattr(self, fld, env_val)


# Fields that may be changed at runtime through /api/settings
EDITABLE_FIELDS: dict[str, type] = {
    "NORMALIZE_CASE": bool,
    "MAX_BOARD_CELLS": int,
    "MAX_WORD_LENGTH": int,
    "MAX_WORDS_PER_REQUEST": int,
    "LOG_LEVEL": str,
    "DEBUG": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def _coerce(value, typ: type):
    if typ is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.lower()
            if lowered in ("1", "true", "yes"):
                return True
            if lowered in ("0", "false", "no"):
                return False
        raise ValueError(f"expected a boolean, got {value!r}")
    if typ is int:
        if isinstance(value, bool):
            raise ValueError(f"expected an integer, got {value!r}")
        coerced = int(value)
        if coerced < 1:
            raise ValueError(f"must be positive, got {coerced}")
        return coerced
    if typ is str and not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return typ(value)


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to ``cfg``. Returns a field -> error message map.

    Valid fields are applied even when others fail.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if name in cfg.__dataclass_fields__:
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            value = _coerce(value, EDITABLE_FIELDS[name])
            if name == "LOG_LEVEL":
                value = value.upper()
                if not isinstance(logging.getLevelName(value), int):
                    raise ValueError(f"unknown log level {value!r}")
            setattr(cfg, name, value)
        except (TypeError, ValueError) as e:
            errors[name] = str(e)
    return errors


settings = Settings()
