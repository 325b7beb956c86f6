import time

from shoe_locker.infrastructure.logging import Timer, _mask_email_fields, mask_email


class TestMaskEmail:
    def test_masks_local_part(self):
        assert mask_email("alice@example.com") == "a***@example.com"

    def test_value_without_domain(self):
        assert mask_email("alice") == "a***"

    def test_empty_value(self):
        assert mask_email(None) == ""
        assert mask_email("") == ""

    def test_masking_twice_is_stable(self):
        assert mask_email(mask_email("alice@example.com")) == "a***@example.com"


class TestMaskEmailFields:
    def test_masks_known_fields_only(self):
        event = {
            "event": "Pickup recorded",
            "user_email": "alice@example.com",
            "recipient": "bob@example.com",
            "log_id": "abc",
        }

        result = _mask_email_fields(None, "info", event)

        assert result["user_email"] == "a***@example.com"
        assert result["recipient"] == "b***@example.com"
        assert result["log_id"] == "abc"


class TestTimer:
    def test_measures_elapsed_time(self):
        with Timer() as t:
            time.sleep(0.01)

        assert t.duration_ms >= 10
