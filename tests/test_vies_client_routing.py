"""Tests for VIES client provider selection (no network)."""
from unittest.mock import MagicMock, patch

import pytest

from connectors.vies.client import check_vat, check_vat_details, get_client, reset_client
from connectors.vies.exceptions import ViesNotConfiguredError
from connectors.vies.soap_client import ViesCheckResult, ViesSoapClient


def _make_settings(mode: str) -> MagicMock:
    s = MagicMock()
    s.vies_mode = mode
    s.vies_service_url = "https://vies.example.test/checkVatService"
    s.vies_timeout_seconds = 5
    return s


def test_soap_mode_builds_soap_client() -> None:
    with patch("vatcheck.core.config.settings", _make_settings("soap")):
        client = get_client()
        assert isinstance(client, ViesSoapClient)
        assert client.service_url == "https://vies.example.test/checkVatService"
        assert client.timeout_seconds == 5


def test_client_is_cached() -> None:
    with patch("vatcheck.core.config.settings", _make_settings("soap")):
        assert get_client() is get_client()


def test_reset_client_rebuilds() -> None:
    with patch("vatcheck.core.config.settings", _make_settings("soap")):
        first = get_client()
        reset_client()
        assert get_client() is not first


def test_off_mode_raises() -> None:
    with patch("vatcheck.core.config.settings", _make_settings("off")):
        with pytest.raises(ViesNotConfiguredError) as exc_info:
            get_client()
        assert "VIES_MODE=off" in str(exc_info.value)


def test_check_vat_delegates_to_client() -> None:
    with patch("vatcheck.core.config.settings", _make_settings("soap")):
        with patch.object(ViesSoapClient, "check_vat", return_value=True) as mock_check:
            assert check_vat("BE", "0403199702") is True
            mock_check.assert_called_once_with("BE", "0403199702")


def test_check_vat_details_uses_cached_client() -> None:
    result = ViesCheckResult(country_code="BE", vat_number="0403199702", valid=True, name="ACME SA")
    with patch("vatcheck.core.config.settings", _make_settings("soap")):
        with patch.object(ViesSoapClient, "check_vat_details", return_value=result) as mock_details:
            assert check_vat_details("BE", "0403199702") is result
            assert check_vat_details("BE", "0403199702") is result
            assert mock_details.call_count == 2
        assert get_client() is get_client()


def test_module_helpers_surface_off_mode() -> None:
    with patch("vatcheck.core.config.settings", _make_settings("off")):
        with pytest.raises(ViesNotConfiguredError):
            check_vat("BE", "0403199702")
        with pytest.raises(ViesNotConfiguredError):
            check_vat_details("BE", "0403199702")
