import re
import secrets
import time
import unicodedata
from typing import Callable

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    normalized = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    return _SLUG_STRIP.sub("-", normalized.lower()).strip("-") or "item"


def unique_slug(value: str, exists: Callable[[str], bool]) -> str:
    base = slugify(value)
    candidate = base
    suffix = 2
    while exists(candidate):
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate


def generate_payment_id() -> str:
    """Local payment reference, e.g. ``pay_1718000000000_k3j9x2ab``."""
    return f"pay_{int(time.time() * 1000)}_{secrets.token_hex(4)}"
