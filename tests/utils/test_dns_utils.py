"""
Unit tests for DNS utilities.
"""
import pytest
from unittest.mock import patch, MagicMock
from dns.resolver import NXDOMAIN, NoAnswer, Timeout, NoNameservers

from sniax.utils.dns_utils import DNSUtils
from sniax.core.exceptions import ValidationError, NetworkError


def _target(name):
    """Build a mock rdata whose target renders as name."""
    answer = MagicMock()
    answer.target.to_text.return_value = name
    return answer


class TestDomainHandling:
    """Test domain validation and normalization."""

    def test_validate_domain_valid(self):
        """Test domain validation with valid domains."""
        dns_utils = DNSUtils()

        assert dns_utils.validate_domain("example.com") is True
        assert dns_utils.validate_domain("sub.example.com") is True
        assert dns_utils.validate_domain("sub-domain.example.com") is True
        assert dns_utils.validate_domain("example.co.uk") is True

    def test_validate_domain_invalid(self):
        """Test domain validation with invalid domains."""
        dns_utils = DNSUtils()

        for domain in ["", None, "invalid", "invalid..", ".com", "example..com",
                       "http://example.com"]:
            with pytest.raises(ValidationError):
                dns_utils.validate_domain(domain)

    @pytest.mark.parametrize("raw, expected", [
        ("https://example.com", "example.com"),
        ("http://example.com", "example.com"),
        ("www.example.com", "example.com"),
        ("https://www.example.com", "example.com"),
        ("http://www.example.com", "example.com"),
    ])
    def test_normalize_domain(self, raw, expected):
        """Test that schemes and a leading www. are stripped."""
        assert DNSUtils.normalize_domain(raw) == expected

    @pytest.mark.parametrize("raw", [
        "https://example.com", "www.example.com", "https://www.api.example.com",
        "http://www.example.co.uk",
    ])
    def test_normalize_domain_idempotent(self, raw):
        """Test that normalizing twice equals normalizing once."""
        once = DNSUtils.normalize_domain(raw)
        assert DNSUtils.normalize_domain(once) == once

    @pytest.mark.parametrize("domain", [
        "example.com", "api.example.com", "wwwexample.com", "example.www.com",
    ])
    def test_normalize_domain_unchanged(self, domain):
        """Test that domains without a prefix are left alone."""
        assert DNSUtils.normalize_domain(domain) == domain


class TestLookups:
    """Test resolver-backed lookups."""

    @patch('sniax.utils.dns_utils.Resolver')
    def test_resolve_nameservers_success(self, mock_resolver):
        """Test successful NS resolution."""
        mock_resolver_instance = MagicMock()
        mock_resolver_instance.resolve.return_value = [
            _target("ns1.example.com."), _target("ns2.example.com.")
        ]
        mock_resolver.return_value = mock_resolver_instance

        dns_utils = DNSUtils()
        result = dns_utils.resolve_nameservers("example.com")

        assert result == ["ns1.example.com", "ns2.example.com"]
        mock_resolver_instance.resolve.assert_called_once_with("example.com", 'NS')

    @pytest.mark.parametrize("error", [NXDOMAIN(), NoAnswer(), Timeout(), NoNameservers()])
    @patch('sniax.utils.dns_utils.Resolver')
    def test_resolve_nameservers_failure(self, mock_resolver, error):
        """Test that resolver failures become NetworkError."""
        mock_resolver_instance = MagicMock()
        mock_resolver_instance.resolve.side_effect = error
        mock_resolver.return_value = mock_resolver_instance

        dns_utils = DNSUtils()
        with pytest.raises(NetworkError):
            dns_utils.resolve_nameservers("example.com")

    @patch('sniax.utils.dns_utils.Resolver')
    def test_resolve_nameservers_empty(self, mock_resolver):
        """Test that an empty answer is a failure."""
        mock_resolver_instance = MagicMock()
        mock_resolver_instance.resolve.return_value = []
        mock_resolver.return_value = mock_resolver_instance

        with pytest.raises(NetworkError):
            DNSUtils().resolve_nameservers("example.com")

    @patch('sniax.utils.dns_utils.Resolver')
    def test_resolve_cname_success(self, mock_resolver):
        """Test a single CNAME hop."""
        mock_resolver_instance = MagicMock()
        mock_resolver_instance.resolve.return_value = [_target("edge.cdn.net.")]
        mock_resolver.return_value = mock_resolver_instance

        result = DNSUtils().resolve_cname("www.example.com")

        assert result == "edge.cdn.net"
        mock_resolver_instance.resolve.assert_called_once_with("www.example.com", 'CNAME')

    @patch('sniax.utils.dns_utils.Resolver')
    def test_resolve_cname_no_answer(self, mock_resolver):
        """Test that a host without CNAME raises NetworkError."""
        mock_resolver_instance = MagicMock()
        mock_resolver_instance.resolve.side_effect = NoAnswer()
        mock_resolver.return_value = mock_resolver_instance

        with pytest.raises(NetworkError):
            DNSUtils().resolve_cname("example.com")

    @patch('sniax.utils.dns_utils.Resolver')
    def test_resolver_timeout_configured(self, mock_resolver):
        """Test that the timeout is applied to the resolver."""
        mock_resolver_instance = MagicMock()
        mock_resolver.return_value = mock_resolver_instance

        DNSUtils(timeout=7)

        assert mock_resolver_instance.timeout == 7
        assert mock_resolver_instance.lifetime == 7
