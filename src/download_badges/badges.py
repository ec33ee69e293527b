"""Badge data formatting for download and install counts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from download_badges.errors import BadgeServiceError
from download_badges.models import BadgeData

METRIC_PREFIXES = ["k", "M", "G", "T", "P", "E", "Z", "Y"]

ERROR_COLOR = "lightgrey"


def metric(count: int) -> str:
    """Format a count with a metric suffix.

    Examples: 999 -> "999", 1234 -> "1.2k", 15300 -> "15k", 999999 -> "1M"
    """
    sign = "-" if count < 0 else ""
    magnitude = abs(count)
    for index in range(len(METRIC_PREFIXES) - 1, -1, -1):
        limit = 1000 ** (index + 1)
        if magnitude < limit:
            continue
        scaled = Decimal(magnitude) / Decimal(limit)
        if scaled < 10:
            one_decimal = str(scaled.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
            if not one_decimal.endswith("0"):
                return f"{sign}{one_decimal}{METRIC_PREFIXES[index]}"
        rounded = int(scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        if rounded < 1000 or index + 1 >= len(METRIC_PREFIXES):
            return f"{sign}{rounded}{METRIC_PREFIXES[index]}"
        return f"{sign}1{METRIC_PREFIXES[index + 1]}"
    return str(count)


def floor_count_color(
    count: int, yellow: int = 10, yellowgreen: int = 100, green: int = 1000
) -> str:
    if count <= 0:
        return "red"
    if count < yellow:
        return "yellow"
    if count < yellowgreen:
        return "yellowgreen"
    if count < green:
        return "green"
    return "brightgreen"


def render_downloads_badge(
    downloads: int,
    *,
    interval: str = "",
    version: str | None = None,
    label: str = "downloads",
    label_override: str | None = None,
    color_override: str | None = None,
) -> BadgeData:
    """Build badge data for a download (or install) count.

    Args:
        downloads: Validated non-negative count.
        interval: Qualifier appended to the message ("day", "week", ...);
            empty for unbounded totals.
        version: When given, the label becomes "downloads@<version>".
        label: Service default label, used when neither override nor
            version applies.
        label_override: Explicit label, wins over everything else.
        color_override: Explicit color instead of the count-based scale.
    """
    if label_override:
        badge_label = label_override
    elif version:
        badge_label = f"downloads@{version}"
    else:
        badge_label = label

    suffix = f"/{interval}" if interval else ""
    return BadgeData(
        label=badge_label,
        message=f"{metric(downloads)}{suffix}",
        color=color_override or floor_count_color(downloads),
    )


def render_error_badge(error: BadgeServiceError, label: str) -> BadgeData:
    return BadgeData(
        label=label,
        message=error.pretty_message,
        color=ERROR_COLOR,
        is_error=True,
    )
