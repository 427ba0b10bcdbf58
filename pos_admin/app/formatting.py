from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from urllib.parse import urljoin, urlparse

EMPTY_VALUE = "—"
# Asia/Jakarta has no DST; a fixed offset is exact.
WIB = timezone(timedelta(hours=7), "WIB")


def format_currency(amount: float | int | None) -> str:
    """Render an IDR amount: ``1000 -> "Rp1.000"``, ``1500.5 -> "Rp1.500,50"``."""
    if amount is None:
        return EMPTY_VALUE
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    value = abs(value)
    whole = int(value)
    cents = int((value - whole) * 100)
    grouped = f"{whole:,}".replace(",", ".")
    if cents:
        return f"{sign}Rp{grouped},{cents:02d}"
    return f"{sign}Rp{grouped}"


def format_datetime(value: datetime | None) -> str:
    if value is None:
        return EMPTY_VALUE
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(WIB).strftime("%d %b %Y %H:%M WIB")


def resolve_image_url(base_url: str, image_url: str | None) -> str | None:
    if not image_url:
        return None
    parsed = urlparse(image_url)
    if parsed.scheme in {"http", "https"} and parsed.netloc:
        return image_url
    return urljoin(base_url.rstrip("/") + "/", image_url.lstrip("/"))
