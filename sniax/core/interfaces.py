"""Base interfaces and data models for SNIAX components.

This module defines the contract shared by every enumeration technique, along
with the data models used to pass DNS answers and per-domain reports between
components.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class Answer:
    """A single resource record surfaced from a DNS response.

    Attributes:
        name: Owner name as it appears on the wire (e.g., www.example.com.)
        rdtype: Record type mnemonic, either 'A' or 'CNAME'
        ttl: Time to live in seconds
        value: Record data in presentation format
    """
    name: str
    rdtype: str
    ttl: int = 0
    value: str = ''


@dataclass
class Result:
    """Data model representing the enumeration report for one domain.

    Subdomains are kept per method in the order they were discovered. Names
    found more than once (across retries or techniques) are kept every time.

    Attributes:
        domain: The normalized target domain
        nameservers: Name servers returned by the NS lookup
        subdomains: Dictionary mapping method names to discovered names
        errors: Triage messages for failures scoped to this domain
    """
    domain: str
    nameservers: List[str] = None
    subdomains: Dict[str, List[str]] = None
    errors: List[str] = None

    def __post_init__(self):
        """Initialize default values for optional attributes."""
        if self.nameservers is None:
            self.nameservers = []
        if self.subdomains is None:
            self.subdomains = {}
        if self.errors is None:
            self.errors = []

    def add(self, method: str, names: List[str]) -> None:
        """Append names discovered by a method."""
        self.subdomains.setdefault(method, []).extend(names)

    @property
    def total(self) -> int:
        """Total number of names reported, duplicates included."""
        return sum(len(names) for names in self.subdomains.values())


class DiscoveryModule(ABC):
    """Base interface for all enumeration techniques.

    Each module implements one technique (zone transfer, CNAME chaining, SNI
    probing) against a single domain. Modules never raise for expected
    network failures; they log and return whatever they collected.

    Attributes:
        domain: The target domain to discover subdomains for
        config: Dictionary of additional configuration options
    """

    def __init__(self, domain: str, **kwargs):
        """Initialize the discovery module.

        Args:
            domain: The target domain to discover subdomains for
            **kwargs: Additional configuration options specific to the technique
        """
        self.domain = domain
        self.config = kwargs

    @abstractmethod
    def discover(self) -> List[str]:
        """Execute the technique and return discovered hostnames.

        Returns:
            Ordered list of discovered hostnames, duplicates allowed
        """
        pass

    @property
    def name(self) -> str:
        """Return the name of this technique.

        Returns:
            The name of the technique, derived from the class name
        """
        return self.__class__.__name__


def strip_root(name: Optional[str]) -> str:
    """Strip the trailing root dot from a DNS name."""
    if not name:
        return ''
    return name[:-1] if name.endswith('.') else name
