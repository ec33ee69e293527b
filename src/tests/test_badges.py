import pytest

from download_badges.badges import (
    floor_count_color,
    metric,
    render_downloads_badge,
    render_error_badge,
)
from download_badges.errors import (
    NotFoundError,
    RateLimitedError,
    SchemaValidationError,
    TransportError,
)


@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (0, "0"),
        (999, "999"),
        (1000, "1k"),
        (1234, "1.2k"),
        (1250, "1.3k"),
        (1950, "2k"),
        (15500, "16k"),
        (15300, "15k"),
        (999_999, "1M"),
        (2_500_000, "2.5M"),
        (-1500, "-1.5k"),
    ],
)
def test_metric(count, expected) -> None:
    assert metric(count) == expected


@pytest.mark.parametrize(
    ("count", "color"),
    [
        (0, "red"),
        (9, "yellow"),
        (99, "yellowgreen"),
        (999, "green"),
        (1000, "brightgreen"),
    ],
)
def test_floor_count_color(count, color) -> None:
    assert floor_count_color(count) == color


def test_render_downloads_badge_labels() -> None:
    assert render_downloads_badge(5).label == "downloads"
    assert render_downloads_badge(5, version="1.0.0").label == "downloads@1.0.0"
    assert render_downloads_badge(5, label="active installs").label == "active installs"
    assert (
        render_downloads_badge(5, version="1.0.0", label_override="dl").label == "dl"
    )


def test_render_downloads_badge_message_and_color() -> None:
    badge = render_downloads_badge(42_000, interval="month")
    assert badge.message == "42k/month"
    assert badge.color == "brightgreen"
    assert badge.is_error is False

    assert render_downloads_badge(42_000, color_override="blue").color == "blue"


def test_render_error_badge() -> None:
    cases = [
        (TransportError("timeout"), "inaccessible"),
        (NotFoundError("gone"), "not found"),
        (RateLimitedError("slow down"), "rate limited by upstream service"),
        (SchemaValidationError("bad shape"), "invalid"),
    ]
    for error, message in cases:
        badge = render_error_badge(error, "downloads")
        assert badge.to_endpoint_json() == {
            "schemaVersion": 1,
            "label": "downloads",
            "message": message,
            "color": "lightgrey",
            "isError": True,
        }


def test_schema_error_context_in_str() -> None:
    error = SchemaValidationError("bad shape", context={"field": "daily"})
    assert str(error) == "bad shape | context={'field': 'daily'}"
