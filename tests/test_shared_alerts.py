"""
shared/header_util.py, shared/exceptions.py 테스트
"""

from unittest.mock import MagicMock

import pytest
from rest_framework.exceptions import NotFound

from shared.exceptions import BadRequestAlertException, alert_exception_handler
from shared.header_util import (
    create_alert,
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
)


class TestHeaderUtil:
    def test_create_alert(self):
        assert create_alert("hello", 3) == {
            "X-firstcodeApp-alert": "hello",
            "X-firstcodeApp-params": "3",
        }

    def test_entity_alerts(self):
        assert create_entity_creation_alert("wishlist", 1)["X-firstcodeApp-alert"] == (
            "A new wishlist is created with identifier 1"
        )
        assert create_entity_update_alert("wishlist", 2)["X-firstcodeApp-alert"] == (
            "A wishlist is updated with identifier 2"
        )
        assert create_entity_deletion_alert("wishlist", "3")["X-firstcodeApp-alert"] == (
            "A wishlist is deleted with identifier 3"
        )

    def test_failure_alert(self, caplog):
        with caplog.at_level("WARNING", logger="shared.header_util"):
            headers = create_failure_alert("wishlist", "idexists", "boom")
        assert headers == {
            "X-firstcodeApp-error": "error.idexists",
            "X-firstcodeApp-params": "wishlist",
        }
        assert "boom" in caplog.text

    def test_application_name_from_settings(self, settings):
        settings.ALERT_APPLICATION_NAME = "otherApp"
        assert set(create_alert("m", 1)) == {"X-otherApp-alert", "X-otherApp-params"}


class TestAlertExceptionHandler:
    def test_bad_request_alert(self):
        exc = BadRequestAlertException("msg", "wishlist", "idexists")
        resp = alert_exception_handler(exc, {})

        assert resp.status_code == 400
        assert resp.data is None
        assert resp["X-firstcodeApp-error"] == "error.idexists"
        assert resp["X-firstcodeApp-params"] == "wishlist"

    def test_exception_attributes(self):
        exc = BadRequestAlertException("msg", "wishlist", "idexists")
        assert exc.default_message == "msg"
        assert exc.entity_name == "wishlist"
        assert exc.error_key == "idexists"
        assert exc.detail == "msg"

    def test_other_exceptions_fall_through(self):
        resp = alert_exception_handler(NotFound(), {"view": MagicMock(), "request": None})
        assert resp.status_code == 404
        assert "X-firstcodeApp-error" not in resp

    def test_unhandled_exception_returns_none(self):
        assert alert_exception_handler(ValueError("x"), {}) is None
