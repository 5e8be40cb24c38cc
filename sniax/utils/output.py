"""Shared output sink for discovered subdomains.

Every enumeration task writes to the same sink. Each hostname is written as a
single line while holding the sink lock, so concurrent writers can never
interleave inside a line. No ordering between writers is promised.
"""

import logging
import sys
import threading
from typing import List, Optional, TextIO


class OutputSink:
    """Line-atomic sink writing to the console and, optionally, a file."""

    def __init__(self, output_file: Optional[str] = None, stream: Optional[TextIO] = None):
        """Initialize the sink.

        Args:
            output_file: Path of a file to create for the discovered names
            stream: Console stream (defaults to sys.stdout)

        Raises:
            OSError: If the output file cannot be created
        """
        self.output_file = output_file
        self.stream = stream if stream is not None else sys.stdout
        self.lines_written = 0
        self.logger = logging.getLogger('sniax.output')
        self._lock = threading.Lock()
        self._file = open(output_file, 'w') if output_file else None

    def write(self, subdomains: List[str]) -> None:
        """Write discovered hostnames, one per line.

        Args:
            subdomains: Hostnames to write; an empty list is a no-op
        """
        for subdomain in subdomains:
            line = f"{subdomain}\n"
            with self._lock:
                self.stream.write(line)
                self.stream.flush()
                if self._file is not None:
                    self._file.write(line)
                    self._file.flush()
                self.lines_written += 1

    def close(self) -> None:
        """Close the output file if one was opened."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None
                self.logger.debug(f"Closed output file {self.output_file}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
