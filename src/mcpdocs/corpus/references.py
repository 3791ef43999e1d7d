"""Conversion between document identifiers and external references."""

from __future__ import annotations

from mcpdocs.errors import InvalidIdentifier
from mcpdocs.utils.files import is_safe_identifier

DEFAULT_SCHEME = "docs://"


def build_reference(identifier: str, scheme: str = DEFAULT_SCHEME) -> str:
    return f"{scheme}{identifier}"


def resolve_reference(reference: str, scheme: str = DEFAULT_SCHEME, extension: str = ".md") -> str:
    """Strip the scheme from ``reference`` and validate the identifier left over.

    Raises InvalidIdentifier for a foreign scheme or an unsafe identifier.
    """
    if not reference.startswith(scheme):
        raise InvalidIdentifier(
            f"Invalid URI scheme. Expected {scheme}, got: {reference}", identifier=reference
        )
    identifier = reference[len(scheme):]
    if not is_safe_identifier(identifier, extension):
        raise InvalidIdentifier(f"Invalid filename: {identifier}", identifier=identifier)
    return identifier
