"""Tests for the lead-capture settings built at startup."""

import logging
from types import SimpleNamespace

import pytest
from django.apps import apps
from django.conf import settings

from apps.core.management.commands.runserver import Command as RunserverCommand
from apps.submissions.conf import LeadCaptureSettings, get_lead_capture_settings
from config.settings.base import bounded_db_options


def _django_settings(**overrides) -> SimpleNamespace:
    values = {
        "API_KEY": "key",
        "ADMIN_PASSWORD": "admin",
        "NOTIFICATION_RECIPIENTS": ["owner@example.com"],
        "DEFAULT_FROM_EMAIL": "leads@example.com",
        "SITE_NAME": "MarketBloom Studio",
    }
    values.update(overrides)
    return SimpleNamespace(**values)


class TestLeadCaptureSettings:
    def test_from_django_settings(self) -> None:
        config = LeadCaptureSettings.from_django_settings(_django_settings())

        assert config.api_key == "key"
        assert config.admin_password == "admin"
        assert config.notification_recipients == ("owner@example.com",)
        assert config.notification_sender == "leads@example.com"
        assert config.notifications_enabled

    def test_blank_recipients_disable_notifications(self) -> None:
        config = LeadCaptureSettings.from_django_settings(_django_settings(NOTIFICATION_RECIPIENTS=["", ""]))

        assert config.notification_recipients == ()
        assert not config.notifications_enabled

    def test_built_once_from_project_settings(self) -> None:
        config = get_lead_capture_settings()

        assert config is get_lead_capture_settings()
        assert config.api_key == settings.API_KEY
        assert config.admin_password == settings.ADMIN_PASSWORD


class TestBoundedDbOptions:
    """DB_TIMEOUT becomes a driver-level timeout."""

    def test_sqlite(self) -> None:
        database = bounded_db_options({"ENGINE": "django.db.backends.sqlite3", "NAME": "db.sqlite"}, 7)
        assert database["OPTIONS"] == {"timeout": 7}

    def test_postgres(self) -> None:
        database = bounded_db_options({"ENGINE": "django.db.backends.postgresql", "NAME": "leads"}, 7)
        assert database["OPTIONS"] == {"connect_timeout": 7, "options": "-c statement_timeout=7000"}

    def test_explicit_options_are_kept(self) -> None:
        database = bounded_db_options(
            {"ENGINE": "django.db.backends.sqlite3", "NAME": "db.sqlite", "OPTIONS": {"timeout": 30}}, 7
        )
        assert database["OPTIONS"] == {"timeout": 30}

    def test_other_engines_untouched(self) -> None:
        database = bounded_db_options({"ENGINE": "django.db.backends.mysql", "NAME": "leads"}, 7)
        assert database["OPTIONS"] == {}


class TestRunserverPort:
    def test_defaults_to_configured_port(self, settings) -> None:
        settings.PORT = 5123
        assert RunserverCommand().default_port == "5123"


class TestStartupChecks:
    """Warnings and notices logged when the submissions app becomes ready."""

    @pytest.fixture
    def submissions_config(self, monkeypatch):
        config = apps.get_app_config("submissions")
        # ready() rebuilds the settings; put the original back afterwards.
        monkeypatch.setattr(config, "lead_capture", config.lead_capture)
        return config

    def test_blank_secrets_warn(self, settings, caplog, submissions_config) -> None:
        settings.API_KEY = ""
        settings.ADMIN_PASSWORD = ""

        with caplog.at_level(logging.INFO, logger="apps.submissions.apps"):
            submissions_config.ready()

        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert any("API_KEY is not configured" in message for message in warnings)
        assert any("ADMIN_PASSWORD is not configured" in message for message in warnings)
        assert submissions_config.lead_capture.api_key == ""

    def test_configured_secrets_do_not_warn(self, caplog, submissions_config) -> None:
        with caplog.at_level(logging.INFO, logger="apps.submissions.apps"):
            submissions_config.ready()

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert "Email notifications: enabled" in caplog.text

    def test_notifications_not_configured(self, settings, caplog, submissions_config) -> None:
        settings.NOTIFICATION_RECIPIENTS = []

        with caplog.at_level(logging.INFO, logger="apps.submissions.apps"):
            submissions_config.ready()

        assert "Email notifications: not configured" in caplog.text
