"""DNS message codec for SNIAX.

This module builds the AXFR query sent to a name server and decodes the
responses read back from the TCP stream. Message construction and parsing are
delegated to dnspython; this module adds the name checks, the DNS-over-TCP
length framing and the filtering of answers down to the record types SNIAX
reports (A and CNAME).

All functions are pure: they never touch the network.
"""

import re
import struct
from typing import List, Tuple

import dns.exception
import dns.flags
import dns.message
import dns.name
import dns.rdataclass
import dns.rdatatype

from sniax.core.exceptions import EncodeError, DecodeError
from sniax.core.interfaces import Answer

# Standard query opcode (RFC 1035 section 4.1.1)
OPCODE_QUERY = 0

# Record types surfaced to callers
REPORTED_TYPES = (dns.rdatatype.A, dns.rdatatype.CNAME)

MAX_LABEL_LENGTH = 63
MAX_TCP_MESSAGE = 0xFFFF

_LABEL_PATTERN = re.compile(r'^[A-Za-z0-9_-]+$')
_LENGTH_PREFIX = struct.Struct('!H')


def _to_name(domain: str) -> dns.name.Name:
    """Convert a domain string to an absolute DNS name.

    Raises:
        EncodeError: If the domain is not a valid DNS name
    """
    if not domain or not isinstance(domain, str):
        raise EncodeError("Domain must be a non-empty string")

    text = domain[:-1] if domain.endswith('.') else domain
    for label in text.split('.'):
        if not label:
            raise EncodeError(f"Empty label in domain: {domain}")
        if len(label) > MAX_LABEL_LENGTH:
            raise EncodeError(f"Label too long in domain: {domain}")
        if not _LABEL_PATTERN.match(label):
            raise EncodeError(f"Invalid characters in domain: {domain}")

    try:
        return dns.name.from_text(text + '.')
    except dns.exception.DNSException as e:
        raise EncodeError(f"Cannot encode domain {domain}: {e}") from e


def build_axfr_query(domain: str) -> bytes:
    """Build a wire-format AXFR query for a domain.

    The message carries a single question for ``domain + "."`` with type AXFR
    and class IN, recursion desired, opcode QUERY.

    Args:
        domain: Domain to request a zone transfer for

    Returns:
        Unframed DNS message bytes

    Raises:
        EncodeError: If the domain cannot be represented as a DNS name
    """
    qname = _to_name(domain)
    query = dns.message.make_query(
        qname,
        dns.rdatatype.AXFR,
        dns.rdataclass.IN,
        flags=dns.flags.RD
    )
    query.set_opcode(OPCODE_QUERY)

    try:
        return query.to_wire()
    except dns.exception.DNSException as e:
        raise EncodeError(f"Failed to pack AXFR query for {domain}: {e}") from e


def frame_tcp_message(wire: bytes) -> bytes:
    """Prefix a DNS message with its 2-byte length for transport over TCP.

    Raises:
        EncodeError: If the message does not fit the 16-bit length field
    """
    if len(wire) > MAX_TCP_MESSAGE:
        raise EncodeError(f"DNS message too large for TCP framing: {len(wire)} bytes")
    return _LENGTH_PREFIX.pack(len(wire)) + wire


def parse_response(data: bytes) -> List[Answer]:
    """Decode a DNS message and return its A and CNAME answers.

    Other record types present in the answer section are ignored. One Answer
    is produced per resource record, in wire order.

    Args:
        data: Unframed DNS message bytes

    Returns:
        List of Answer records

    Raises:
        DecodeError: If the buffer is not a well-formed DNS message
    """
    try:
        message = dns.message.from_wire(data)
    except (dns.exception.DNSException, ValueError) as e:
        raise DecodeError(f"Failed to unpack DNS message: {e}") from e

    answers = []
    for rrset in message.answer:
        if rrset.rdtype not in REPORTED_TYPES:
            continue
        rdtype = dns.rdatatype.to_text(rrset.rdtype)
        owner = rrset.name.to_text()
        for rdata in rrset:
            answers.append(Answer(
                name=owner,
                rdtype=rdtype,
                ttl=rrset.ttl,
                value=rdata.to_text()
            ))
    return answers


def parse_tcp_stream(buffer: bytes) -> Tuple[List[Answer], bytes]:
    """Decode every complete length-framed DNS message in a TCP buffer.

    A zone transfer arrives as a stream of framed messages that socket reads
    split at arbitrary points. Complete messages are decoded in order; a
    trailing partial message (or partial length prefix) is handed back so the
    caller can prepend it to the next read.

    Args:
        buffer: Bytes read from the socket, starting at a length prefix

    Returns:
        Tuple of the A and CNAME answers from all complete messages and the
        unconsumed remainder of the buffer

    Raises:
        DecodeError: If a complete message cannot be decoded
    """
    answers = []
    offset = 0

    while len(buffer) - offset >= _LENGTH_PREFIX.size:
        (length,) = _LENGTH_PREFIX.unpack_from(buffer, offset)
        end = offset + _LENGTH_PREFIX.size + length
        if end > len(buffer):
            break
        answers.extend(parse_response(buffer[offset + _LENGTH_PREFIX.size:end]))
        offset = end

    return answers, buffer[offset:]
