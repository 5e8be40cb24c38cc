"""Command-line interface for SNIAX."""

import argparse
import sys
import logging
from typing import List, Optional

from sniax import __version__
from sniax.core.discovery_manager import DiscoveryManager, FanoutDriver
from sniax.core.exceptions import ValidationError
from sniax.core.interfaces import Result
from sniax.utils.error_handler import ErrorHandler
from sniax.utils.dns_utils import DNSUtils
from sniax.utils.output import OutputSink

USAGE = "Usage: sniax -f <domain_file> or -d <single_domain> [-delay <ms>] [-o <output>]"


class CLI:
    """Command-line interface for SNIAX."""

    def __init__(self):
        """Initialize the CLI."""
        self.parser = self._create_parser()
        self.error_handler = ErrorHandler()
        self.dns_utils = DNSUtils()
        self.logger = logging.getLogger('sniax.cli')

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser with all options.

        Returns:
            Configured argument parser
        """
        parser = argparse.ArgumentParser(
            prog='sniax',
            description='SNIAX - subdomain discovery via AXFR, CNAME chaining and SNI probing',
            epilog='Example: sniax -d example.com -delay 500 -o found.txt'
        )

        # Target options
        parser.add_argument(
            '-d', '--domain',
            default='',
            help='Single domain to enumerate subdomains'
        )

        parser.add_argument(
            '-f', '--file',
            default='',
            help='File containing list of domains'
        )

        # Timing options
        parser.add_argument(
            '-delay', '--delay',
            type=int,
            default=1000,
            help='AXFR read timeout and pacing delay in milliseconds (default: 1000)'
        )

        # Output options
        parser.add_argument(
            '-o', '--output',
            default='',
            help='Output file to save discovered subdomains'
        )

        # Technique options
        parser.add_argument(
            '--methods',
            help='Comma-separated list of techniques to run: axfr,cname,sni (default: all)',
            default=None
        )

        parser.add_argument(
            '--wordlist',
            help='File of subdomain labels for SNI probing (default: built-in list)'
        )

        parser.add_argument(
            '--sni-timeout',
            type=float,
            default=None,
            help='Connect/handshake timeout for each SNI probe in seconds (default: system)'
        )

        parser.add_argument(
            '--sni-workers',
            type=int,
            default=1,
            help='Number of SNI probes run in parallel per domain (default: 1)'
        )

        # Concurrency options
        parser.add_argument(
            '--concurrency',
            type=int,
            default=10,
            help='Maximum number of concurrent domains and name server probes (default: 10)'
        )

        # Verbosity options
        parser.add_argument(
            '-v', '--verbose',
            action='store_true',
            help='Enable verbose output'
        )

        parser.add_argument(
            '-q', '--quiet',
            action='store_true',
            help='Suppress the summary'
        )

        # Version
        parser.add_argument(
            '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )

        return parser

    def parse_arguments(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Args:
            args: Command-line arguments (None for sys.argv)

        Returns:
            Parsed arguments namespace
        """
        parsed_args = self.parser.parse_args(args)

        # Process methods
        if parsed_args.methods:
            parsed_args.methods = [m.strip() for m in parsed_args.methods.split(',') if m.strip()]

        return parsed_args

    def validate_input(self, args: argparse.Namespace) -> bool:
        """Validate user input.

        Args:
            args: Parsed arguments namespace

        Returns:
            True if input is valid
        """
        if args.delay < 1:
            self.error_handler.handle_error('input', "Delay must be at least 1 millisecond")
            return False

        if args.concurrency < 1:
            self.error_handler.handle_error('input', "Concurrency must be at least 1")
            return False

        if args.sni_workers < 1:
            self.error_handler.handle_error('input', "SNI workers must be at least 1")
            return False

        if args.sni_timeout is not None and args.sni_timeout <= 0:
            self.error_handler.handle_error('input', "SNI timeout must be positive")
            return False

        if args.verbose and args.quiet:
            self.error_handler.handle_error(
                'input', "Cannot specify both --verbose and --quiet")
            return False

        for method in args.methods or []:
            if method not in DiscoveryManager.AVAILABLE_METHODS:
                self.error_handler.handle_error('input', f"Unknown discovery method: {method}")
                return False

        return True

    def load_domains(self, domain_file: str, single_domain: str) -> List[str]:
        """Load target domains from a file or the single-domain option.

        The file takes precedence. Surrounding whitespace is trimmed and blank
        lines are skipped.

        Args:
            domain_file: Path of a newline-separated domain list
            single_domain: Single domain given on the command line

        Returns:
            Raw domain strings in input order
        """
        domains = []
        if domain_file:
            try:
                with open(domain_file, 'r', encoding='utf-8') as f:
                    for line in f:
                        domain = line.strip()
                        if domain:
                            domains.append(domain)
            except (OSError, UnicodeDecodeError) as e:
                self.error_handler.handle_error(
                    'system', f"Failed to read domain file: {domain_file}", e)
        elif single_domain:
            domains.append(single_domain.strip())
        return domains

    def prepare_domains(self, raw_domains: List[str]) -> List[str]:
        """Normalize and validate target domains.

        Invalid domains are reported and skipped.

        Args:
            raw_domains: Domains as supplied by the user

        Returns:
            Normalized, valid domains
        """
        domains = []
        for raw in raw_domains:
            domain = self.dns_utils.normalize_domain(raw)
            try:
                self.dns_utils.validate_domain(domain)
            except ValidationError as e:
                self.error_handler.handle_error('input_warning', f"Skipping {raw}: {e}")
                continue
            domains.append(domain)
        return domains

    def display_summary(self, results: List[Result]) -> None:
        """Display summary of results.

        Args:
            results: Per-domain enumeration results
        """
        print("\nSummary:", file=sys.stderr)
        print(f"Domains enumerated: {len(results)}", file=sys.stderr)
        print(f"Total subdomains reported: {sum(r.total for r in results)}", file=sys.stderr)

        for result in results:
            counts = ", ".join(
                f"{method}: {len(names)}" for method, names in result.subdomains.items())
            status = f" ({len(result.errors)} errors)" if result.errors else ""
            print(f"  {result.domain}: {counts or 'no results'}{status}", file=sys.stderr)


def main():
    """Main entry point for the CLI."""
    cli = CLI()
    args = cli.parse_arguments()

    # Configure error handler based on verbosity
    error_handler = ErrorHandler(verbose=args.verbose)
    cli.error_handler = error_handler

    raw_domains = cli.load_domains(args.file, args.domain)
    if not raw_domains:
        print(USAGE)
        sys.exit(1)

    try:
        if cli.validate_input(args):
            domains = cli.prepare_domains(raw_domains)
            if not domains:
                print(USAGE)
                sys.exit(1)

            try:
                sink = OutputSink(args.output or None)
            except OSError as e:
                error_handler.handle_error(
                    'system', f"Failed to create output file: {args.output}", e)
                return 1

            with sink:
                driver = FanoutDriver(
                    domains,
                    sink,
                    concurrency=args.concurrency,
                    error_handler=error_handler,
                    delay=args.delay,
                    methods=args.methods,
                    wordlist=args.wordlist,
                    sni_timeout=args.sni_timeout,
                    sni_workers=args.sni_workers,
                    verbose=args.verbose
                )
                results = driver.run()

            # Display summary if not quiet
            if not args.quiet:
                cli.display_summary(results)

            return 0
    except Exception as e:
        error_handler.handle_error('unexpected', "An unexpected error occurred", e)
        return 1

    return 1


if __name__ == '__main__':
    sys.exit(main())
