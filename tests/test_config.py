"""Tests for configuration loading and validation."""

import pytest

from therapy_booking.config import (
    AppConfig,
    BusinessConfig,
    SchedulingConfig,
    _csv_list,
    _safe_float,
    _safe_int,
    _validate_config,
)


class TestConfigValidation:
    def test_default_config_passes_validation(self):
        config = AppConfig()
        _validate_config(config)  # should not raise

    def test_negative_cancellation_notice(self):
        config = AppConfig(business=BusinessConfig(cancellation_notice_hours=-1))
        with pytest.raises(ValueError, match="CANCELLATION_NOTICE_HOURS"):
            _validate_config(config)

    def test_zero_booking_window(self):
        config = AppConfig(scheduling=SchedulingConfig(booking_window_months=0))
        with pytest.raises(ValueError, match="BOOKING_WINDOW_MONTHS"):
            _validate_config(config)

    def test_empty_time_slots(self):
        config = AppConfig(scheduling=SchedulingConfig(time_slots=()))
        with pytest.raises(ValueError, match="TIME_SLOTS"):
            _validate_config(config)

    def test_duplicate_time_slots(self):
        config = AppConfig(scheduling=SchedulingConfig(time_slots=("9:00 AM", "9:00 AM")))
        with pytest.raises(ValueError, match="duplicates"):
            _validate_config(config)

    def test_negative_reply_delay(self):
        config = AppConfig(scheduling=SchedulingConfig(reply_delay_sec=-0.1))
        with pytest.raises(ValueError, match="REPLY_DELAY_SEC"):
            _validate_config(config)

    def test_zero_max_input_length(self):
        config = AppConfig(scheduling=SchedulingConfig(max_input_length=0))
        with pytest.raises(ValueError, match="MAX_INPUT_LENGTH"):
            _validate_config(config)


class TestEnvParsing:
    def test_safe_int_parsing(self):
        assert _safe_int("NONEXISTENT_VAR_12345", "42") == 42

    def test_safe_int_rejects_garbage(self, monkeypatch):
        monkeypatch.setenv("BAD_INT_VAR", "twelve")
        with pytest.raises(ValueError, match="BAD_INT_VAR"):
            _safe_int("BAD_INT_VAR", "1")

    def test_safe_float_parsing(self):
        assert _safe_float("NONEXISTENT_VAR_12345", "0.7") == pytest.approx(0.7)

    def test_csv_list_strips_blanks(self, monkeypatch):
        monkeypatch.setenv("SLOTS_VAR", " 9:00 AM, ,10:00 AM ")
        assert _csv_list("SLOTS_VAR", "") == ("9:00 AM", "10:00 AM")
