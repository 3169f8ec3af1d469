"""Board configuration.

Sources, lowest to highest precedence:
1. Built-in defaults (Microsoft vs. Google, Apple, Amazon, Meta, IBM)
2. config.yaml
3. Competitor CSV / CLI flags (applied by the caller)

Competitor CSV columns:
- name (required)
- ticker (optional, "symbol" also accepted)

Example:
    name,ticker
    Google,GOOGL
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompanyTarget:
    display_name: str
    ticker: Optional[str] = None


@dataclass(frozen=True)
class DisplayLimits:
    sentiment: int = 3
    locality: int = 5
    per_competitor: int = 2

    def __post_init__(self):
        for name in ("sentiment", "locality", "per_competitor"):
            if getattr(self, name) < 0:
                raise ValueError(f"display_limits.{name} must be >= 0, got {getattr(self, name)}")


DEFAULT_PRIMARY = CompanyTarget("Microsoft", "MSFT")

DEFAULT_COMPETITORS = (
    CompanyTarget("Google", "GOOGL"),
    CompanyTarget("Apple", "AAPL"),
    CompanyTarget("Amazon", "AMZN"),
    CompanyTarget("Meta", "META"),
    CompanyTarget("IBM", "IBM"),
)


@dataclass(frozen=True)
class BoardConfig:
    primary: CompanyTarget = DEFAULT_PRIMARY
    competitors: List[CompanyTarget] = field(default_factory=lambda: list(DEFAULT_COMPETITORS))
    limits: DisplayLimits = field(default_factory=DisplayLimits)
    news_timeout: Optional[float] = None  # None: NewsClient default / NEWS_TIMEOUT_SECONDS
    max_workers: Optional[int] = None

    def __post_init__(self):
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.news_timeout is not None and self.news_timeout <= 0:
            raise ValueError(f"news.timeout_seconds must be > 0, got {self.news_timeout}")

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "BoardConfig":
        """Load from config.yaml structure."""
        company = cfg.get("company") or {}
        primary = DEFAULT_PRIMARY
        if company:
            primary = _target_from_dict(company)

        competitors = list(DEFAULT_COMPETITORS)
        if "competitors" in cfg:
            competitors = [_target_from_dict(c) for c in (cfg.get("competitors") or [])]

        limits_cfg = cfg.get("display_limits") or {}
        limits = DisplayLimits(
            sentiment=int(limits_cfg.get("sentiment", 3)),
            locality=int(limits_cfg.get("locality", 5)),
            per_competitor=int(limits_cfg.get("per_competitor", 2)),
        )

        news_cfg = cfg.get("news") or {}
        timeout = news_cfg.get("timeout_seconds")
        max_workers = cfg.get("max_workers")

        return cls(
            primary=primary,
            competitors=competitors,
            limits=limits,
            news_timeout=float(timeout) if timeout is not None else None,
            max_workers=int(max_workers) if max_workers is not None else None,
        )

    def with_primary(self, name: Optional[str] = None, ticker: Optional[str] = None) -> "BoardConfig":
        if not name and not ticker:
            return self
        # A new name without a ticker drops the old ticker
        primary = CompanyTarget(
            display_name=name or self.primary.display_name,
            ticker=ticker.upper() if ticker else (None if name else self.primary.ticker),
        )
        return replace(self, primary=primary)

    def with_competitors(self, competitors: List[CompanyTarget]) -> "BoardConfig":
        return replace(self, competitors=list(competitors))


def _target_from_dict(raw: Dict[str, Any]) -> CompanyTarget:
    name = str(raw.get("name") or "").strip()
    if not name:
        raise ValueError(f"Company entry is missing a name: {raw!r}")
    ticker = raw.get("symbol") or raw.get("ticker")
    return CompanyTarget(display_name=name, ticker=str(ticker).strip().upper() if ticker else None)


def load_config(path: Optional[str] = "config.yaml") -> BoardConfig:
    """
    Load board configuration from a YAML file.

    Args:
        path: Path to config file. None means defaults only.

    Returns:
        BoardConfig (defaults for anything the file does not set)
    """
    if path is None:
        return BoardConfig()

    config_path = Path(path)
    if not config_path.exists():
        logger.warning(f"Config file {config_path} not found, using defaults")
        return BoardConfig()

    with open(config_path) as f:
        cfg = yaml.safe_load(f) or {}

    if not isinstance(cfg, dict):
        raise ValueError(f"{config_path} must contain a mapping at the top level")

    return BoardConfig.from_config(cfg)


def load_competitors_csv(path: str) -> List[CompanyTarget]:
    df = pd.read_csv(path)
    if "name" not in df.columns:
        raise ValueError("Competitor CSV must contain a 'name' column")

    ticker_col = "ticker" if "ticker" in df.columns else ("symbol" if "symbol" in df.columns else None)

    targets: List[CompanyTarget] = []
    seen = set()
    for _, row in df.iterrows():
        if pd.isna(row["name"]):
            continue
        name = str(row["name"]).strip()
        if not name:
            continue

        # De-dup on name, preserve order
        key = name.lower()
        if key in seen:
            continue
        seen.add(key)

        ticker = None
        if ticker_col and pd.notna(row.get(ticker_col)):
            ticker = str(row.get(ticker_col)).strip().upper() or None
        targets.append(CompanyTarget(display_name=name, ticker=ticker))

    return targets
