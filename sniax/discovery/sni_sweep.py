"""SNI probing module for SNIAX."""

import logging
import socket
import ssl
from typing import List, Optional

from sniax.core.interfaces import DiscoveryModule
from sniax.utils.concurrency import ConcurrentExecutor
from sniax.utils.progress import progress_bar

HTTPS_PORT = 443

# Repeated labels are probed, and reported, once per occurrence
DEFAULT_WORDLIST = [
    'www', 'mail', 'ftp', 'webmail', 'smtp', 'portal', 'vpn', 'api', 'dev', 'test',
    'staging', 'beta', 'alpha', 'dev-api', 'sandbox', 'preprod', 'prod', 'uat', 'qa', 'demo',
    'auth', 'login', 'register', 'signup', 'accounts', 'user', 'profile', 'admin', 'adminpanel',
    'help', 'support', 'docs', 'documentation', 'contact', 'knowledgebase', 'kb', 'faq',
    'blog', 'news', 'media', 'static', 'images', 'img', 'cdn', 'video', 'assets', 'resources',
    'shop', 'store', 'cart', 'checkout', 'order', 'payments', 'billing', 'invoice', 'pay',
    'analytics', 'track', 'tracking', 'stats', 'metrics', 'data', 'insights', 'reports',
    'status', 'monitor', 'dashboard', 'gateway', 'node', 'cdn', 'proxy', 'edge', 'backup',
    'community', 'forum', 'discuss', 'discussion', 'social', 'events', 'meetup', 'groups',
    'internal', 'devtools', 'tools', 'config', 'settings', 'configurations',
    'developers', 'developer', 'api-docs', 'api-portal', 'graphql', 'rest',
    'marketing', 'promo', 'offers', 'campaign', 'landing', 'sales',
    'client', 'userportal', 'account', 'my', 'myaccount', 'customer', 'members', 'portal',
    'app', 'test1', 'test2', 'api-staging', 'dashboard', 'console', 'manage', 'sso', 'single-sign-on',
    'backup', 'service', 'sync',
]


class SNIProbeSweep(DiscoveryModule):
    """Discover subdomains by completing TLS handshakes for candidate names.

    A handshake that completes for ``label.domain`` means some server answered
    for that SNI hostname. Certificates are not validated: the handshake
    itself is the signal. Failed handshakes are the expected outcome for most
    candidates and are skipped silently.
    """

    def __init__(self, domain: str, **kwargs):
        """Initialize the SNI probe sweep.

        Args:
            domain: Target domain to discover subdomains for
            **kwargs: Additional configuration options
                - wordlist: Path to a custom file of subdomain labels
                - timeout: Connect/handshake timeout in seconds (None for system default)
                - max_workers: Number of probes run in parallel
                - show_progress: Whether to show progress indicator
        """
        super().__init__(domain, **kwargs)
        self.wordlist = kwargs.get('wordlist')
        self.timeout: Optional[float] = kwargs.get('timeout')
        self.max_workers = kwargs.get('max_workers', 1)
        self.show_progress = kwargs.get('show_progress', False)
        self.logger = logging.getLogger('sniax.discovery.sni_sweep')

    def discover(self) -> List[str]:
        """Probe every candidate hostname.

        Returns:
            Hostnames that accepted a TLS connection, in wordlist order
        """
        candidates = [f"{label}.{self.domain}" for label in self._load_wordlist()]

        with progress_bar(total=len(candidates),
                          desc=f"SNI probing {self.domain}",
                          disable=not self.show_progress,
                          unit="host") as progress:

            def probe(hostname: str) -> bool:
                accepted = self._probe(hostname)
                progress.update(1)
                return accepted

            if self.max_workers > 1:
                accepted = ConcurrentExecutor(max_workers=self.max_workers).execute_ordered(
                    probe, candidates)
            else:
                accepted = [probe(hostname) for hostname in candidates]

        discovered = [hostname for hostname, ok in zip(candidates, accepted) if ok]
        for hostname in discovered:
            self.logger.info(f"SNI detected: {hostname}")
        return discovered

    def _probe(self, hostname: str) -> bool:
        """Attempt a TLS handshake with SNI set to hostname.

        Returns:
            True if the handshake completed
        """
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

        try:
            with socket.create_connection((hostname, HTTPS_PORT), timeout=self.timeout) as sock:
                with context.wrap_socket(sock, server_hostname=hostname):
                    return True
        except (OSError, UnicodeError):
            return False

    def _load_wordlist(self) -> List[str]:
        """Load subdomain labels.

        Returns:
            List of subdomain labels
        """
        if self.wordlist:
            try:
                with open(self.wordlist, 'r') as f:
                    return [line.strip() for line in f if line.strip()]
            except OSError as e:
                self.logger.error(f"Error loading wordlist: {e}")

        return list(DEFAULT_WORDLIST)
