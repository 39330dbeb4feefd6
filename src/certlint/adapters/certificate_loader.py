"""
Certificate loader — PEM or DER bytes to `cryptography.x509.Certificate`.

Used by the `certlint` command to feed files to the lint engine. PEM is
detected by its armour header; anything else is treated as DER.
"""

from __future__ import annotations

from pathlib import Path

from cryptography import x509

from certlint.result import ErrorCode, Result

_PEM_MARKER = b"-----BEGIN CERTIFICATE-----"


def decode_certificate(data: bytes) -> x509.Certificate:
    """Decode a single certificate; raises ValueError on malformed input."""
    if _PEM_MARKER in data:
        return x509.load_pem_x509_certificate(data)
    return x509.load_der_x509_certificate(data)


def load_certificate(path: Path) -> Result[x509.Certificate]:
    """
    Read and decode the certificate stored at `path`.

    Returns Result.failure(PARSE_ERROR, ...) when the file cannot be read
    or does not hold a decodable certificate.
    """
    return Result.from_computation(
        lambda: decode_certificate(path.read_bytes()),
        ErrorCode.PARSE_ERROR,
        f"unable to load certificate from {str(path)!r}",
    )
