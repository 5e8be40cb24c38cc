"""Discovery manager for orchestrating subdomain enumeration."""

import concurrent.futures
from typing import List, Optional
import logging

from sniax.core.interfaces import Result
from sniax.core.exceptions import ConfigurationError, NetworkError
from sniax.discovery.axfr import AXFRProber
from sniax.discovery.cname_chain import CNAMEWalker
from sniax.discovery.sni_sweep import SNIProbeSweep
from sniax.utils.concurrency import ConcurrentExecutor
from sniax.utils.dns_utils import DNSUtils
from sniax.utils.error_handler import ErrorHandler
from sniax.utils.output import OutputSink


class DiscoveryManager:
    """Runs every enumeration technique for one domain.

    Name servers are resolved first. Zone transfers are then attempted against
    all of them in parallel; once every transfer has finished, the CNAME chain
    is walked and finally the SNI sweep runs. Each technique writes its
    results to the shared sink as soon as it completes.
    """

    # Techniques in execution order
    AVAILABLE_METHODS = ('axfr', 'cname', 'sni')

    def __init__(self, domain: str, sink: OutputSink, delay: int = 1000,
                 concurrency: int = 10, methods: Optional[List[str]] = None,
                 wordlist: Optional[str] = None, sni_timeout: Optional[float] = None,
                 sni_workers: int = 1, error_handler: Optional[ErrorHandler] = None,
                 dns_utils: Optional[DNSUtils] = None, verbose: bool = False):
        """Initialize the discovery manager.

        Args:
            domain: Normalized target domain
            sink: Shared output sink
            delay: AXFR read timeout in milliseconds
            concurrency: Maximum number of concurrent name server probes
            methods: Techniques to run (None for all)
            wordlist: Optional path to a custom SNI wordlist
            sni_timeout: Connect/handshake timeout for SNI probes in seconds
            sni_workers: Number of SNI probes run in parallel
            error_handler: Error handler instance
            dns_utils: DNSUtils instance used for lookups
            verbose: Enable verbose output

        Raises:
            ConfigurationError: If a timing or worker setting is out of range
        """
        if delay < 1:
            raise ConfigurationError("Delay must be at least 1 millisecond")
        if concurrency < 1 or sni_workers < 1:
            raise ConfigurationError("Worker counts must be at least 1")
        for method in methods or []:
            if method not in self.AVAILABLE_METHODS:
                raise ConfigurationError(f"Unknown discovery method: {method}")

        self.domain = domain
        self.sink = sink
        self.delay = delay
        self.concurrency = concurrency
        self.methods = list(methods) if methods else list(self.AVAILABLE_METHODS)
        self.wordlist = wordlist
        self.sni_timeout = sni_timeout
        self.sni_workers = sni_workers
        self.verbose = verbose
        self.error_handler = error_handler or ErrorHandler(verbose=verbose)
        self.dns_utils = dns_utils or DNSUtils()
        self.logger = logging.getLogger('sniax.discovery_manager')

    def enumerate(self) -> Result:
        """Run the enabled techniques against the domain.

        Returns:
            Result holding the names reported by each technique
        """
        result = Result(domain=self.domain)
        self.logger.info(f"Enumerating subdomains for {self.domain}...")

        try:
            result.nameservers = self.dns_utils.resolve_nameservers(self.domain)
        except NetworkError as e:
            self.error_handler.handle_error(
                'network', f"Failed to get NS records for domain {self.domain}", e)
            result.errors.append(f"ns: {e}")
            return result

        if 'axfr' in self.methods:
            self._run_axfr(result)

        if 'cname' in self.methods:
            self.logger.info(f"Attempting CNAME chaining for {self.domain}...")
            walker = CNAMEWalker(self.domain, dns_utils=self.dns_utils)
            self._record(result, 'cname', walker.discover())

        if 'sni' in self.methods:
            self.logger.info(f"Attempting SNI enumeration for {self.domain}...")
            sweep = SNIProbeSweep(
                self.domain,
                wordlist=self.wordlist,
                timeout=self.sni_timeout,
                max_workers=self.sni_workers,
                show_progress=self.verbose
            )
            self._record(result, 'sni', sweep.discover())

        return result

    def _run_axfr(self, result: Result) -> None:
        """Probe every name server concurrently and wait for all of them."""
        read_timeout = self.delay / 1000.0

        def probe(nameserver: str) -> List[str]:
            self.logger.info(f"Attempting AXFR on {self.domain} via {nameserver}")
            return AXFRProber(self.domain, nameserver, read_timeout=read_timeout).discover()

        def on_result(nameserver: str, subdomains: List[str]) -> None:
            if not subdomains:
                self.logger.info(f"AXFR on {self.domain} via {nameserver} failed or timed out.")
            self._record(result, 'axfr', subdomains)

        def on_error(nameserver: str, error: Exception) -> None:
            self.error_handler.log_error(
                f"Unexpected error during AXFR on {self.domain} via {nameserver}", error)
            result.errors.append(f"axfr {nameserver}: {error}")

        ConcurrentExecutor(max_workers=self.concurrency).execute(
            probe, result.nameservers, on_result=on_result, on_error=on_error)

    def _record(self, result: Result, method: str, subdomains: List[str]) -> None:
        """Write a technique's names to the sink and the result."""
        # Completion callbacks run on the calling thread only
        result.add(method, subdomains)
        self.sink.write(subdomains)


class FanoutDriver:
    """Runs a DiscoveryManager for every input domain concurrently."""

    def __init__(self, domains: List[str], sink: OutputSink, concurrency: int = 10,
                 error_handler: Optional[ErrorHandler] = None, **manager_options):
        """Initialize the fan-out driver.

        Args:
            domains: Normalized target domains
            sink: Shared output sink
            concurrency: Maximum number of domains enumerated at once; also
                bounds the name server probes inside each domain
            error_handler: Error handler instance
            **manager_options: Additional DiscoveryManager options
        """
        self.domains = domains
        self.sink = sink
        self.concurrency = concurrency
        self.error_handler = error_handler or ErrorHandler(
            verbose=manager_options.get('verbose', False))
        self.manager_options = manager_options
        self.logger = logging.getLogger('sniax.discovery_manager')

    def _enumerate_domain(self, domain: str) -> Result:
        manager = DiscoveryManager(
            domain,
            self.sink,
            concurrency=self.concurrency,
            error_handler=self.error_handler,
            **self.manager_options
        )
        return manager.enumerate()

    def run(self) -> List[Result]:
        """Enumerate every domain and block until all have finished.

        Returns:
            One Result per domain, in input order
        """
        results = {}

        with concurrent.futures.ThreadPoolExecutor(max_workers=max(1, self.concurrency)) as executor:
            future_to_domain = {
                executor.submit(self._enumerate_domain, domain): index
                for index, domain in enumerate(self.domains)
            }

            for future in concurrent.futures.as_completed(future_to_domain):
                index = future_to_domain[future]
                domain = self.domains[index]
                try:
                    results[index] = future.result()
                    self.logger.debug(f"Finished {domain}: {results[index].total} names")
                except Exception as e:
                    self.error_handler.log_error(f"Enumeration of {domain} failed", e)
                    results[index] = Result(domain=domain, errors=[str(e)])

        return [results[index] for index in range(len(self.domains))]
