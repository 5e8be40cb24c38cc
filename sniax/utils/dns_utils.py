"""DNS utility functions for SNIAX.

This module provides the resolver-backed lookups the enumeration techniques
depend on (NS and CNAME records), along with domain validation and the
normalization applied to user-supplied targets before enumeration starts.
"""

import re
from typing import List
import logging
from dns.resolver import Resolver, NXDOMAIN, NoAnswer, Timeout, NoNameservers
import dns.exception

from sniax.core.exceptions import ValidationError, NetworkError
from sniax.core.interfaces import strip_root

SCHEME_PREFIXES = ('https://', 'http://')
WWW_PREFIX = 'www.'


class DNSUtils:
    """DNS utility functions for record lookups and domain handling.

    This class wraps a dnspython resolver to look up the name servers and
    CNAME targets of a host. Lookup failures are converted to NetworkError so
    callers can decide whether a failure is fatal for their technique.

    Attributes:
        timeout: DNS query timeout in seconds
        logger: Logger instance for this class
        resolver: DNS resolver instance
    """

    def __init__(self, timeout: int = 3):
        """Initialize DNS utilities.

        Args:
            timeout: DNS query timeout in seconds
        """
        self.timeout = timeout
        self.logger = logging.getLogger('sniax.dns_utils')
        self.resolver = Resolver()
        self.resolver.timeout = timeout
        self.resolver.lifetime = timeout

    def validate_domain(self, domain: str) -> bool:
        """Validate if a string is a valid domain name.

        Args:
            domain: Domain name to validate

        Returns:
            True if domain is valid

        Raises:
            ValidationError: If domain is invalid
        """
        domain_pattern = r'^([a-zA-Z0-9_]([a-zA-Z0-9_\-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}$'

        if not domain or not isinstance(domain, str):
            raise ValidationError("Domain must be a non-empty string")

        if not re.match(domain_pattern, domain):
            raise ValidationError(f"Invalid domain format: {domain}")

        return True

    @staticmethod
    def normalize_domain(domain: str) -> str:
        """Strip an http(s) scheme and a leading 'www.' label from a domain.

        Args:
            domain: Raw domain as supplied by the user

        Returns:
            Normalized domain
        """
        for prefix in SCHEME_PREFIXES:
            if domain.startswith(prefix):
                domain = domain[len(prefix):]
                break

        if domain.startswith(WWW_PREFIX):
            domain = domain[len(WWW_PREFIX):]

        return domain

    def resolve_nameservers(self, domain: str) -> List[str]:
        """Resolve the authoritative name servers of a domain.

        Args:
            domain: Domain to look up

        Returns:
            List of name server hostnames without the trailing dot

        Raises:
            NetworkError: If the lookup fails or returns no records
        """
        try:
            answers = self.resolver.resolve(domain, 'NS')
            nameservers = [strip_root(answer.target.to_text()) for answer in answers]
        except NXDOMAIN:
            raise NetworkError(f"Domain {domain} does not exist")
        except NoAnswer:
            raise NetworkError(f"No NS records for {domain}")
        except Timeout:
            raise NetworkError(f"Timeout resolving NS records for {domain}")
        except NoNameservers:
            raise NetworkError(f"No nameservers available for {domain}")
        except dns.exception.DNSException as e:
            raise NetworkError(f"Error resolving NS records for {domain}") from e

        if not nameservers:
            raise NetworkError(f"No NS records for {domain}")

        self.logger.debug(f"Name servers for {domain}: {', '.join(nameservers)}")
        return nameservers

    def resolve_cname(self, host: str) -> str:
        """Resolve one CNAME hop for a host.

        Args:
            host: Hostname to look up

        Returns:
            CNAME target without the trailing dot

        Raises:
            NetworkError: If the host has no CNAME record or the lookup fails
        """
        try:
            answers = self.resolver.resolve(host, 'CNAME')
            return strip_root(answers[0].target.to_text())
        except NXDOMAIN:
            raise NetworkError(f"Domain {host} does not exist")
        except NoAnswer:
            raise NetworkError(f"No CNAME record for {host}")
        except Timeout:
            raise NetworkError(f"Timeout resolving CNAME for {host}")
        except NoNameservers:
            raise NetworkError(f"No nameservers available for {host}")
        except dns.exception.DNSException as e:
            raise NetworkError(f"Error resolving CNAME for {host}") from e
