import json

import debug


def test_dub_command_prints_badge(fake_get, capsys) -> None:
    fake_get.queue_json(
        {"downloads": {"total": 100, "monthly": 40, "weekly": 10, "daily": 2}}
    )

    exit_code = debug.main(["--log-level", "WARNING", "dub", "dw", "vibe-d"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["message"] == "10/week"
    assert fake_get.calls[0]["url"].endswith("/packages/vibe-d/stats")


def test_wordpress_command_sums_history(fake_get, capsys) -> None:
    fake_get.queue_json({"2024-01-01": 3, "2024-01-02": 5})

    exit_code = debug.main(["wordpress", "plugin", "dm", "bbpress"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["message"] == "8/month"
    assert fake_get.calls[0]["params"] == {"slug": "bbpress", "limit": 30}


def test_installs_command_reports_errors(fake_get, capsys) -> None:
    fake_get.queue_json({"error": "Theme not found"})

    exit_code = debug.main(["installs", "theme", "nope"])

    assert exit_code == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["error"] == "NotFoundError"
    assert payload["message"] == "not found"
