
import json
import logging
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from streamcatalog.config.logging import JsonFormatter, configure_logging
from streamcatalog.core.exceptions import (
    AlreadyExistsError,
    AppException,
    InvalidInputError,
    ItemNotFoundError,
    NotFoundError,
    UnauthorizedError,
)
from streamcatalog.core.telemetry import setup_telemetry
from streamcatalog.models.schemas import Genre, User


class TestExceptions:
    def test_to_dict(self):
        exc = ItemNotFoundError("stream-9")

        assert exc.to_dict() == {
            "error": {
                "code": "NOT_FOUND",
                "message": "item not found: stream-9",
                "details": {"resource": "item", "identifier": "stream-9"},
            }
        }

    def test_with_context_keeps_kind(self):
        original = AlreadyExistsError("item", "stream-1")

        wrapped = original.with_context("failed to add content")

        assert type(wrapped) is AlreadyExistsError
        assert isinstance(wrapped, InvalidInputError)
        assert wrapped.message == "failed to add content: item with id 'stream-1' already exists"
        assert str(wrapped) == wrapped.message
        assert wrapped.error_code == "ALREADY_EXISTS"
        assert wrapped.details == original.details
        assert wrapped.details is not original.details
        # original untouched
        assert original.message == "item with id 'stream-1' already exists"

    def test_with_context_chain(self):
        original = ItemNotFoundError("stream-1")

        with pytest.raises(NotFoundError) as exc_info:
            try:
                raise original
            except AppException as e:
                raise e.with_context("lookup") from e

        assert exc_info.value.__cause__ is original
        assert exc_info.value.resource == "item"

    def test_unauthorized_is_reserved_kind(self):
        exc = UnauthorizedError()
        assert exc.error_code == "UNAUTHORIZED"
        assert isinstance(exc, AppException)


class TestGenre:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Accion", Genre.ACTION),
            ("action", Genre.ACTION),
            ("Terror", Genre.HORROR),
            ("Horror", Genre.HORROR),
            ("DOCUMENTAL", Genre.DOCUMENTARY),
            ("Animation", Genre.ANIMATION),
            (Genre.MUSICAL, Genre.MUSICAL),
        ],
    )
    def test_parse(self, value, expected):
        assert Genre.parse(value) is expected

    @pytest.mark.parametrize("value", ["Fantasy", "", None, 3])
    def test_parse_rejects(self, value):
        assert Genre.parse(value) is None
        assert Genre.is_valid(value) is False


class TestUser:
    def test_watch_history_is_copy(self):
        user = User(id="user-1", username="alice", subscription="Premium")
        user.add_to_watch_history("stream-1")

        history = user.watch_history

        assert history == ("stream-1",)
        with pytest.raises(AttributeError):
            history.append("stream-2")
        assert user.watch_history == ("stream-1",)

    def test_current_item_defaults_to_none(self):
        user = User(id="user-1", username="alice", subscription="Premium")
        assert user.current_item is None

    def test_id_is_read_only(self, user_store):
        user = User(id="user-1", username="alice", subscription="Premium")
        user_store.add_user(user)

        with pytest.raises(ValidationError):
            user.id = "user-2"

        assert user_store.get_user("user-1").id == "user-1"

    def test_profile_fields_stay_editable(self):
        user = User(id="user-1", username="alice", subscription="Basic")
        user.subscription = "Premium"
        assert user.subscription == "Premium"


class TestLogging:
    def test_json_formatter_includes_context(self):
        record = logging.LogRecord(
            name="streamcatalog.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="played %s",
            args=("stream-1",),
            exc_info=None,
        )
        record.user_id = "user-1"
        record.item_id = "stream-1"

        payload = json.loads(JsonFormatter().format(record))

        assert payload["message"] == "played stream-1"
        assert payload["level"] == "INFO"
        assert payload["user_id"] == "user-1"
        assert payload["item_id"] == "stream-1"

    def test_configure_logging_levels(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers, root.level
        try:
            configure_logging(debug=True)
            assert root.level == logging.DEBUG
            assert not isinstance(root.handlers[0].formatter, JsonFormatter)

            configure_logging(debug=False)
            assert root.level == logging.INFO
            assert isinstance(root.handlers[0].formatter, JsonFormatter)
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)


class TestTelemetry:
    def test_disabled_by_default(self):
        mock_settings = MagicMock()
        mock_settings.ENABLE_OTEL = False

        assert setup_telemetry(mock_settings) is None

    @patch("streamcatalog.core.telemetry.trace")
    @patch("streamcatalog.core.telemetry.OTLPSpanExporter")
    @patch("streamcatalog.core.telemetry.BatchSpanProcessor")
    def test_otel_enabled(self, mock_processor, mock_exporter, mock_trace):
        mock_settings = MagicMock()
        mock_settings.ENABLE_OTEL = True
        mock_settings.APP_NAME = "test"
        mock_settings.APP_VERSION = "1.0"
        mock_settings.DEBUG = False

        provider = setup_telemetry(mock_settings)

        assert provider is not None
        mock_exporter.assert_called_once()
        mock_processor.assert_called_once_with(mock_exporter.return_value)
        mock_trace.set_tracer_provider.assert_called_once_with(provider)
