"""Custom exceptions for SNIAX.

This module defines the exception hierarchy used throughout the SNIAX application.
All exceptions inherit from the base SniaxError class to allow for consistent
error handling and identification of SNIAX-specific exceptions.
"""


class SniaxError(Exception):
    """Base exception for all SNIAX errors.

    All custom exceptions in the SNIAX application should inherit from this class
    to allow for consistent error handling and identification.
    """
    pass


class ValidationError(SniaxError):
    """Raised when input validation fails.

    This exception is raised when user input fails validation, such as invalid
    domain names or invalid command-line arguments.
    """
    pass


class NetworkError(SniaxError):
    """Raised when network operations fail.

    This exception is raised when network-related operations fail, such as NS or
    CNAME lookups. It typically indicates connectivity issues, timeouts, missing
    records or other network-related problems.
    """
    pass


class ConfigurationError(SniaxError):
    """Raised when configuration is invalid.

    This exception is raised when a component is constructed with settings it
    cannot work with, such as a non-positive timeout or worker count.
    """
    pass


class CodecError(SniaxError):
    """Base exception for DNS wire format errors."""
    pass


class EncodeError(CodecError):
    """Raised when a DNS message cannot be built.

    Typically the domain is not representable as a DNS name (empty or
    oversized labels, invalid characters).
    """
    pass


class DecodeError(CodecError):
    """Raised when a DNS message cannot be parsed.

    The buffer is malformed, or shorter than the length its framing declares.
    """
    pass
