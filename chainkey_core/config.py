# chainkey_core/config.py

from __future__ import annotations
from dataclasses import dataclass
import os
from .account import AccountCodec
from .constants import SS58_PREFIX, CONFIG_PREFIX_ENV
from .logger import get_logger

log = get_logger("chainkey.config")


@dataclass(frozen=True)
class CodecConfig:
    prefix: int = SS58_PREFIX


def load_codec_config(config: dict | None = None) -> CodecConfig:
    """
    Resolve codec settings.

    Order: explicit config["prefix"], then $CHAINKEY_SS58_PREFIX, then 42.

    Only codecs built here see the env var. DEFAULT_CODEC and
    AccountId.to_text/from_text always use prefix 42 and must not read it.
    """
    config = config or {}

    if config.get("prefix") is not None:
        raw, source = config["prefix"], "config"
    elif os.getenv(CONFIG_PREFIX_ENV):
        raw, source = os.getenv(CONFIG_PREFIX_ENV), CONFIG_PREFIX_ENV
    else:
        raw, source = SS58_PREFIX, "default"

    try:
        prefix = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid SS58 prefix from {source}: {raw!r}") from None

    if not 0 <= prefix <= 0xFF:
        raise ValueError(f"SS58 prefix out of range (0-255) from {source}: {prefix}")

    log.debug(f"SS58 prefix {prefix} ({source})")
    return CodecConfig(prefix=prefix)


def load_codec(config: dict | None = None) -> AccountCodec:
    return AccountCodec(prefix=load_codec_config(config).prefix)
