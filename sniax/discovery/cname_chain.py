"""CNAME chaining module for SNIAX."""

import logging
from typing import List, Optional

from sniax.core.exceptions import NetworkError
from sniax.core.interfaces import DiscoveryModule
from sniax.utils.dns_utils import DNSUtils


class CNAMEWalker(DiscoveryModule):
    """Follow the CNAME chain of a domain, one hop at a time."""

    def __init__(self, domain: str, **kwargs):
        """Initialize the CNAME walker.

        Args:
            domain: Domain the chain starts from
            **kwargs: Additional configuration options
                - dns_utils: DNSUtils instance used for lookups
                - max_hops: Maximum number of hops to record (None for no limit)
        """
        super().__init__(domain, **kwargs)
        self.dns_utils = kwargs.get('dns_utils') or DNSUtils()
        self.max_hops: Optional[int] = kwargs.get('max_hops')
        self.logger = logging.getLogger('sniax.discovery.cname_chain')

    def discover(self) -> List[str]:
        """Walk the chain until it returns to the start, cycles or ends.

        Returns:
            Every distinct intermediate hostname, in chain order
        """
        chain = []
        visited = set()

        try:
            target = self.dns_utils.resolve_cname(self.domain)
        except NetworkError as e:
            self.logger.info(f"Failed to lookup CNAME for {self.domain}: {e}")
            return chain

        while target != self.domain and target not in visited:
            if self.max_hops is not None and len(chain) >= self.max_hops:
                self.logger.debug(f"CNAME chain for {self.domain} stopped after {self.max_hops} hops")
                break

            visited.add(target)
            chain.append(target)

            try:
                target = self.dns_utils.resolve_cname(target)
            except NetworkError:
                break

        return chain
