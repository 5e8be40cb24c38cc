"""Zone transfer (AXFR) module for SNIAX."""

import logging
import socket
import time
from typing import List, Optional

from sniax.core.exceptions import EncodeError, DecodeError
from sniax.core.interfaces import DiscoveryModule, strip_root
from sniax.utils.dns_codec import build_axfr_query, frame_tcp_message, parse_tcp_stream


class AXFRProber(DiscoveryModule):
    """Attempt a zone transfer for one domain against one name server.

    The prober owns a single TCP connection for the whole attempt. After the
    query is sent it performs a fixed number of reads; each failed read is
    followed by a fixed backoff. The transfer is never checked for completion,
    so the attempt budget alone decides when the probe ends.
    """

    MAX_ATTEMPTS = 3
    BACKOFF_SECONDS = 2
    READ_SIZE = 512
    DNS_PORT = 53

    def __init__(self, domain: str, nameserver: str, **kwargs):
        """Initialize the AXFR prober.

        Args:
            domain: Target domain to request a zone transfer for
            nameserver: Name server host to query
            **kwargs: Additional configuration options
                - read_timeout: Deadline for each read in seconds
                - connect_timeout: TCP connect timeout in seconds (None for system default)
                - port: Name server port
        """
        super().__init__(domain, **kwargs)
        self.nameserver = nameserver
        self.read_timeout = kwargs.get('read_timeout', 1.0)
        self.connect_timeout: Optional[float] = kwargs.get('connect_timeout')
        self.port = kwargs.get('port', self.DNS_PORT)
        self.logger = logging.getLogger('sniax.discovery.axfr')

    def discover(self) -> List[str]:
        """Run the zone transfer attempt.

        Returns:
            Hostnames from every A and CNAME answer read, in read order
        """
        subdomains = []

        try:
            sock = socket.create_connection(
                (self.nameserver, self.port), timeout=self.connect_timeout)
        except OSError as e:
            self.logger.error(f"Failed to connect to {self.nameserver} for AXFR of {self.domain}: {e}")
            return subdomains

        try:
            try:
                query = frame_tcp_message(build_axfr_query(self.domain))
            except EncodeError as e:
                self.logger.error(f"Failed to pack AXFR request for {self.domain}: {e}")
                return subdomains

            try:
                sock.sendall(query)
            except OSError as e:
                self.logger.error(f"Failed to send AXFR request to {self.nameserver}: {e}")
                return subdomains

            sock.settimeout(self.read_timeout)
            buffer = b""
            for attempt in range(1, self.MAX_ATTEMPTS + 1):
                try:
                    data = sock.recv(self.READ_SIZE)
                    if not data:
                        raise ConnectionResetError("connection closed by name server")
                except OSError as e:
                    self.logger.debug(
                        f"AXFR read {attempt}/{self.MAX_ATTEMPTS} for {self.domain} "
                        f"via {self.nameserver} failed: {e}")
                    time.sleep(self.BACKOFF_SECONDS)
                    continue

                # A message split across reads stays buffered for the next one
                try:
                    answers, buffer = parse_tcp_stream(buffer + data)
                except DecodeError as e:
                    self.logger.error(
                        f"Failed to unpack AXFR response from {self.nameserver} for {self.domain}: {e}")
                    break

                for answer in answers:
                    subdomain = strip_root(answer.name)
                    subdomains.append(subdomain)
                    self.logger.debug(f"AXFR {self.nameserver}: {subdomain} ({answer.rdtype})")
        finally:
            sock.close()

        return subdomains
