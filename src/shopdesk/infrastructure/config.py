"""Process-wide configuration, read from the environment once at startup.

Invalid values never stop the process: the tax rate is clamped into [0, 1]
(falling back to the default when unparseable) and a currency code that is
not three letters falls back to EUR.  The resulting ``Settings`` is frozen
and injected into the use cases from the composition root.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from shopdesk.domain.model.money import MoneySettings

DEFAULT_TAX_RATE = Decimal("0.21")
DEFAULT_CURRENCY = "EUR"
DEFAULT_LOCALE = "es-ES"

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_CURRENCY_RE = re.compile(r"^[A-Za-z]{3}$")
_TRUE = {"1", "true", "yes", "on"}


def parse_tax_rate(raw: str | None) -> Decimal:
    if raw is None or not raw.strip():
        return DEFAULT_TAX_RATE
    try:
        rate = Decimal(raw.strip())
    except InvalidOperation:
        return DEFAULT_TAX_RATE
    if not rate.is_finite():
        return DEFAULT_TAX_RATE
    return min(max(rate, Decimal(0)), Decimal(1))


def parse_currency(raw: str | None) -> str:
    if raw and _CURRENCY_RE.match(raw.strip()):
        return raw.strip().upper()
    return DEFAULT_CURRENCY


@dataclass(frozen=True)
class Settings:

    money: MoneySettings
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        data_dir = env.get("SHOPDESK_DATA_DIR")
        return cls(
            money=MoneySettings(
                tax_rate=parse_tax_rate(env.get("TAX_RATE")),
                currency_code=parse_currency(env.get("CURRENCY")),
                locale=env.get("MONEY_LOCALE") or DEFAULT_LOCALE,
            ),
            data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
            log_json=(env.get("LOG_JSON") or "").strip().lower() in _TRUE,
        )


def load_environment(env_file: Path = Path(".env")) -> bool:
    """Load ``.env`` into the environment if present; existing vars win."""
    if env_file.exists():
        return load_dotenv(env_file, override=False)
    return False
