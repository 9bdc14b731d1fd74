"""Tests for local/remote validation, the validator facade and ancillary checks."""
from unittest.mock import MagicMock, patch

import pytest

from connectors.vies.exceptions import ViesConnectionError, ViesServiceError
from vatcheck.services.vat_validation import (
    VatValidator,
    validate_country_code,
    validate_ip_address,
    validate_local,
)


class TestValidateLocal:
    def test_valid_checksum(self):
        assert validate_local("BE0000000097") is True
        assert validate_local("be0403199702") is True

    def test_format_ok_checksum_bad(self):
        assert validate_local("BE0999999599") is False

    def test_format_failure_short_circuits(self):
        with patch("vatcheck.services.vat_validation.validate_modulus") as mock_modulus:
            assert validate_local("BE123") is False
            mock_modulus.assert_not_called()

    @pytest.mark.parametrize("vat", ["IT12345678901", "IT00000000000", "PT999999999", "SE123456789012"])
    def test_no_checksum_rule_passes_when_format_passes(self, vat):
        assert validate_local(vat) is True

    def test_no_checksum_rule_still_needs_format(self):
        assert validate_local("IT1234567890") is False

    def test_fr_unverifiable_is_accepted(self):
        assert validate_local("FRXX999999999") is True

    def test_empty(self):
        assert validate_local("") is False


class TestValidateRemote:
    def test_known_number(self, fake_registry):
        validator = VatValidator(registry=fake_registry)
        assert validator.validate_remote("BE0403199702") is True
        assert fake_registry.calls == [("BE", "0403199702")]

    def test_unknown_number(self, fake_registry):
        validator = VatValidator(registry=fake_registry)
        assert validator.validate_remote("DE136695976") is False
        assert fake_registry.calls == [("DE", "136695976")]

    def test_normalized_split_is_forwarded(self, fake_registry):
        validator = VatValidator(registry=fake_registry)
        assert validator.validate_remote("nl004495445b01") is True
        assert fake_registry.calls == [("NL", "004495445B01")]

    @pytest.mark.parametrize("vat", ["", "DE12", "ZZ123456789", "NL123456789"])
    def test_registry_not_called_when_format_fails(self, fake_registry, vat):
        validator = VatValidator(registry=fake_registry)
        assert validator.validate_remote(vat) is False
        assert fake_registry.calls == []

    @pytest.mark.parametrize("vat", ["FRﬀ123456789", "ıT12345678901", "ſE123456789012"])
    def test_non_ascii_case_folding_never_reaches_registry(self, fake_registry, vat):
        validator = VatValidator(registry=fake_registry)
        assert validator.validate_remote(vat) is False
        assert fake_registry.calls == []

    def test_remote_does_not_run_checksum(self, fake_registry):
        """A bad checksum is the registry's call in remote mode."""
        fake_registry.known.add("BE0403199703")
        validator = VatValidator(registry=fake_registry)
        assert validator.validate_remote("BE0403199703") is True

    def test_registry_error_propagates(self, make_registry):
        error = ViesServiceError("MS_UNAVAILABLE", fault_code="soap:Server")
        validator = VatValidator(registry=make_registry(error=error))
        with pytest.raises(ViesServiceError) as exc_info:
            validator.validate_remote("DE136695976")
        assert exc_info.value is error

    def test_default_registry_is_resolved_lazily(self):
        mock_client = MagicMock()
        mock_client.check_vat.return_value = True
        with patch("connectors.vies.client.get_client", return_value=mock_client) as mock_get:
            validator = VatValidator()
            mock_get.assert_not_called()
            assert validator.validate_remote("DE136695976") is True
            mock_get.assert_called_once()
        mock_client.check_vat.assert_called_once_with("DE", "136695976")


class TestFacade:
    def test_default_mode_is_remote(self, fake_registry):
        validator = VatValidator(registry=fake_registry)
        assert validator.validate("BE0403199702") is True
        assert len(fake_registry.calls) == 1

    def test_local_mode_never_calls_registry(self, fake_registry):
        validator = VatValidator(registry=fake_registry)
        assert validator.validate("DE136695976", local=True) is True
        assert validator.validate("DE136695977", local=True) is False
        assert fake_registry.calls == []

    def test_remote_fault_surfaces_from_facade(self, make_registry):
        validator = VatValidator(registry=make_registry(error=ViesConnectionError("down")))
        with pytest.raises(ViesConnectionError):
            validator.validate("DE136695976", local=False)

    def test_local_mode_ignores_broken_registry(self, make_registry):
        validator = VatValidator(registry=make_registry(error=ViesConnectionError("down")))
        assert validator.validate("DE136695976", local=True) is True


class TestCountryCode:
    @pytest.mark.parametrize("code", ["BE", "NL", "GR", "US", "CH"])
    def test_known(self, code):
        assert validate_country_code(code) is True

    @pytest.mark.parametrize("code", ["", "ZZ", "be", "EL", "XI", "BEL"])
    def test_unknown(self, code):
        assert validate_country_code(code) is False


class TestIpAddress:
    @pytest.mark.parametrize("ip", ["8.8.8.8", "185.15.59.224", "2001:4860:4860::8888"])
    def test_public(self, ip):
        assert validate_ip_address(ip) is True

    @pytest.mark.parametrize("ip", ["10.0.0.1", "192.168.1.1", "172.16.5.4", "172.31.255.255", "fd00::1", "fc00::1"])
    def test_private(self, ip):
        assert validate_ip_address(ip) is False

    @pytest.mark.parametrize("ip", ["127.0.0.1", "192.0.2.1", "169.254.1.1", "0.0.0.0", "240.0.0.1", "::1", "fe80::1"])
    def test_only_private_ranges_are_rejected(self, ip):
        assert validate_ip_address(ip) is True

    @pytest.mark.parametrize("ip", ["172.15.255.255", "172.32.0.1"])
    def test_private_range_boundaries(self, ip):
        assert validate_ip_address(ip) is True

    @pytest.mark.parametrize("ip", ["", "999.1.1.1", "not-an-ip", "1.2.3"])
    def test_malformed(self, ip):
        assert validate_ip_address(ip) is False
