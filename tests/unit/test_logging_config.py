"""Unit tests for logging configuration."""

import structlog

from prepaid_card import logging_config
from prepaid_card.logging_config import configure_logging, last4, redact_card_data


def test_configure_logging_binds_service_context(monkeypatch):
    """Test configure_logging binds service and environment to the log context."""
    monkeypatch.setattr(logging_config.settings, "service_name", "prepaid-card-test")
    monkeypatch.setattr(logging_config.settings, "environment", "test")

    try:
        configure_logging()

        context = structlog.contextvars.get_contextvars()
        assert context["service"] == "prepaid-card-test"
        assert context["environment"] == "test"
    finally:
        structlog.contextvars.clear_contextvars()
        structlog.reset_defaults()


def test_last4():
    assert last4("5541710500064352") == "4352"
    assert last4("12") == "12"
    assert last4("") == ""
    assert last4(None) == ""


def test_redact_card_data_masks_card_number_and_drops_cvv():
    event_dict = {
        "event": "card_saved",
        "card_number": "5541710500064352",
        "cvv": "999",
        "customer_id": "123456789",
    }

    result = redact_card_data(None, "info", event_dict)

    assert result == {
        "event": "card_saved",
        "card_number": "4352",
        "customer_id": "123456789",
    }


def test_redact_card_data_leaves_other_entries_alone():
    event_dict = {"event": "cards_found_for_customer", "count": 2}

    assert redact_card_data(None, "debug", dict(event_dict)) == event_dict


def test_configured_pipeline_redacts_card_data(monkeypatch, capsys):
    """Test configured logging never prints a full card number or cvv."""
    monkeypatch.setattr(logging_config.settings, "environment", "production")

    try:
        configure_logging()
        structlog.get_logger().warning(
            "card_insert_conflict", card_number="5541710500064352", cvv="999"
        )

        output = capsys.readouterr().out
        assert "card_insert_conflict" in output
        assert "4352" in output
        assert "5541710500064352" not in output
        assert '"cvv"' not in output
    finally:
        structlog.contextvars.clear_contextvars()
        structlog.reset_defaults()
