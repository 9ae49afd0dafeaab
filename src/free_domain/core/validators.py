"""Syntax rules for subdomain labels and record targets.

The same rules back both the browser form and the registration handler. The
handler always enforces the label rule; target and CNAME checks are enforced
server-side only when ``STRICT_TARGET_VALIDATION`` is enabled.
"""

import re
from dataclasses import dataclass
from typing import Optional

INVALID_LABEL = "Invalid domain name"
INVALID_TARGET = "Invalid target"
CNAME_TARGETS_IPV4 = "CNAME cannot target an IPv4 literal, use an A record"

_LABEL = r"[a-z0-9]([a-z0-9-]*[a-z0-9])?"

_RE_LABEL = re.compile(rf"^{_LABEL}$")

# Digit groups are not bounded to 0-255.
_RE_IPV4 = re.compile(r"^(\d{1,3}\.){3}\d{1,3}$", re.ASCII)

# Exactly seven colons: "::" shorthand with fewer groups does not match.
_RE_IPV6 = re.compile(r"^([0-9a-fA-F]{0,4}:){7}[0-9a-fA-F]{0,4}$")

_RE_DOMAIN = re.compile(rf"^{_LABEL}(\.{_LABEL})*$", re.IGNORECASE | re.ASCII)

_RE_STRICT_IPV4 = re.compile(r"^\d+\.\d+\.\d+\.\d+$", re.ASCII)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a registration request."""

    valid: bool
    reason: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        return cls(valid=False, reason=reason)


def is_valid_label(label: str) -> bool:
    """Check a lowercase subdomain label (no leading/trailing hyphen)."""
    return bool(_RE_LABEL.fullmatch(label))


def is_ipv4_literal(value: str) -> bool:
    return bool(_RE_IPV4.fullmatch(value))


def is_ipv6_literal(value: str) -> bool:
    return bool(_RE_IPV6.fullmatch(value))


def is_domain_name(value: str) -> bool:
    return bool(_RE_DOMAIN.fullmatch(value))


def is_valid_target(value: str) -> bool:
    """Check that a target is an IPv4 literal, IPv6 literal or domain name."""
    return is_ipv4_literal(value) or is_ipv6_literal(value) or is_domain_name(value)


def check_target(target: str, record_type: str) -> Optional[str]:
    """Return the rejection reason for a target, or None if it is acceptable."""
    if not is_valid_target(target):
        return INVALID_TARGET

    if record_type == "CNAME" and _RE_STRICT_IPV4.fullmatch(target):
        return CNAME_TARGETS_IPV4

    return None


def validate_registration(
    label: str, target: str, record_type: str
) -> ValidationResult:
    """
    Validate a registration request without side effects.

    Args:
        label: Subdomain label, already lowercased by the caller
        target: IP address or domain name the record points to
        record_type: DNS record type (A, AAAA, CNAME, ...)

    Returns:
        ValidationResult with the first failing rule's message as reason
    """
    if not is_valid_label(label):
        return ValidationResult.invalid(INVALID_LABEL)

    reason = check_target(target, record_type)

    if reason:
        return ValidationResult.invalid(reason)

    return ValidationResult.ok()
