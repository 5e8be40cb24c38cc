"""
Pytest configuration file for SNIAX tests.
"""
import os
import struct
import sys
import pytest

import dns.message
import dns.rrset

# Add the parent directory to sys.path to allow importing sniax
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


# Common fixtures for tests
@pytest.fixture
def sample_domain():
    """Return a sample domain for testing."""
    return "example.com"


@pytest.fixture
def sample_records():
    """Return answer records as (owner, type, rdata) tuples."""
    return [
        ("www.example.com.", "A", "93.184.216.34"),
        ("alias.example.com.", "CNAME", "www.example.com."),
        ("example.com.", "MX", "10 mail.example.com."),
        ("example.com.", "TXT", "\"v=spf1 -all\""),
    ]


@pytest.fixture
def axfr_response():
    """Return a factory building wire-format AXFR responses."""
    def _build(domain, records, framed=True):
        query = dns.message.make_query(f"{domain}.", "AXFR")
        response = dns.message.make_response(query)
        for owner, rdtype, rdata in records:
            response.answer.append(dns.rrset.from_text(owner, 300, "IN", rdtype, rdata))
        wire = response.to_wire()
        if framed:
            return struct.pack("!H", len(wire)) + wire
        return wire
    return _build
