"""
SNIAX - Subdomain enumeration via zone transfers, CNAME chaining and SNI probing

A command-line reconnaissance tool that attempts DNS zone transfers against
every authoritative name server of a domain, follows its CNAME chain, and
probes a wordlist of common labels with TLS handshakes.
"""

__version__ = "1.0.0"
__author__ = "SNIAX Development Team"
