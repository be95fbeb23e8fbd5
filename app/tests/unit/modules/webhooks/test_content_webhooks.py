"""Unit tests for modules.webhooks content change handling."""

from unittest.mock import MagicMock, call

import pytest

from infrastructure.clients.content import ContentFetchError
from models.webhooks import ContentWebhookPayload
from modules.webhooks import base, content
from modules.webhooks.base import handle_webhook_payload, validate_payload


@pytest.mark.unit
class TestValidatePayload:
    """Tests for validate_payload()."""

    def test_valid_payload(self, payload_factory):
        payload = validate_payload(payload_factory(uid="api::translation.translation"))

        assert isinstance(payload, ContentWebhookPayload)
        assert payload.created_at == "2025-01-01T00:00:00.000Z"
        assert payload.uid == "api::translation.translation"
        assert payload.entry["key"] == "nav.courses"

    def test_missing_model_is_invalid(self):
        assert validate_payload({"event": "entry.update"}) is None

    def test_entry_defaults_to_empty(self):
        payload = validate_payload({"event": "entry.delete", "model": "media"})
        assert payload.entry == {}

    def test_null_entry_read_as_empty(self, payload_factory):
        payload = validate_payload(payload_factory(entry=None))

        assert payload is not None
        assert payload.entry == {}


@pytest.mark.unit
class TestHandleWebhookPayload:
    """Tests for handle_webhook_payload() dispatch."""

    def test_translation_update_invalidates_without_prewarm(
        self, mock_content_client, payload_factory
    ):
        result = handle_webhook_payload(payload_factory(), mock_content_client)

        assert result.status == "success"
        assert result.event == "entry.update"
        assert result.model == "translation"
        assert result.invalidated == ["translations"]
        assert result.prewarmed is False
        mock_content_client.invalidate.assert_called_once_with("translations")
        mock_content_client.get_translations.assert_not_called()

    def test_translation_publish_prewarms(self, mock_content_client, payload_factory):
        result = handle_webhook_payload(
            payload_factory(event="entry.publish"),
            mock_content_client,
            critical_keys=["nav.courses", "nav.enrollNow"],
        )

        assert result.prewarmed is True
        mock_content_client.get_translations.assert_called_once_with()

    def test_prewarm_failure_still_succeeds(self, mock_content_client, payload_factory):
        mock_content_client.get_translations.side_effect = ContentFetchError(
            503, "Service Unavailable"
        )

        result = handle_webhook_payload(
            payload_factory(event="entry.publish"), mock_content_client
        )

        assert result.status == "success"
        assert result.prewarmed is False

    def test_navigation_item_invalidates_both(
        self, mock_content_client, payload_factory
    ):
        result = handle_webhook_payload(
            payload_factory(model="navigation-item"), mock_content_client
        )

        assert result.invalidated == ["navigation-items", "navigation"]
        assert mock_content_client.invalidate.call_args_list == [
            call("navigation-items"),
            call("navigation"),
        ]
        mock_content_client.get_navigation_items.assert_not_called()

    def test_navigation_publish_prewarms_tree(
        self, mock_content_client, payload_factory
    ):
        result = handle_webhook_payload(
            payload_factory(model="navigation-item", event="entry.publish"),
            mock_content_client,
        )

        assert result.prewarmed is True
        mock_content_client.get_navigation_items.assert_called_once_with()

    def test_media_invalidates_media(self, mock_content_client, payload_factory):
        result = handle_webhook_payload(
            payload_factory(model="media", event="entry.publish"),
            mock_content_client,
        )

        assert result.invalidated == ["media"]
        assert result.prewarmed is False
        mock_content_client.invalidate.assert_called_once_with("media")

    def test_unknown_model_ignored(self, mock_content_client, payload_factory):
        result = handle_webhook_payload(
            payload_factory(model="course"), mock_content_client
        )

        assert result.status == "success"
        assert result.model == "course"
        assert result.invalidated == []
        mock_content_client.invalidate.assert_not_called()

    def test_ignored_model_logged_with_webhook_event(
        self, mock_content_client, payload_factory, monkeypatch
    ):
        mock_logger = MagicMock()
        monkeypatch.setattr(base, "logger", mock_logger)

        handle_webhook_payload(payload_factory(model="course"), mock_content_client)

        mock_logger.info.assert_any_call(
            "content_model_ignored", webhook_event="entry.update", content_model="course"
        )

    def test_invalid_payload(self, mock_content_client):
        result = handle_webhook_payload({"entry": {}}, mock_content_client)

        assert result.status == "error"
        mock_content_client.invalidate.assert_not_called()


@pytest.mark.unit
class TestPrewarm:
    """Tests for the pre-warm helpers."""

    def test_prewarm_translations_reports_missing_keys(
        self, mock_content_client, monkeypatch
    ):
        mock_logger = MagicMock()
        monkeypatch.setattr(content, "logger", mock_logger)

        assert content.prewarm_translations(
            mock_content_client, ["nav.courses", "common.error"]
        )

        mock_logger.warning.assert_called_once_with(
            "critical_translation_keys_missing", keys=["common.error"]
        )

    def test_prewarm_navigation_failure(self, mock_content_client):
        mock_content_client.get_navigation_items.side_effect = ContentFetchError(500)
        assert content.prewarm_navigation(mock_content_client) is False
