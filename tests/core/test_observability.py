import json
import logging

from agromove.infrastructure.observability import JSONFormatter, setup_logging


def test_json_formatter_includes_known_extras():
    record = logging.LogRecord("agromove.test", logging.INFO, __file__, 1, "debited %s", ("5.00",), None)
    record.wallet_id = "w-1"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "agromove.test"
    assert payload["message"] == "debited 5.00"
    assert payload["wallet_id"] == "w-1"
    assert "order_id" not in payload


def test_setup_logging_replaces_its_own_handler():
    root = logging.getLogger()
    previous_level = root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        ours = [h for h in root.handlers if getattr(h, "_agromove", False)]
        assert len(ours) == 1
        assert not isinstance(ours[0].formatter, JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        for handler in [h for h in root.handlers if getattr(h, "_agromove", False)]:
            root.removeHandler(handler)
        root.setLevel(previous_level)
