"""Tests for core/validators.py."""

# pylint: disable=missing-function-docstring

import pytest

from free_domain.core.validators import (
    CNAME_TARGETS_IPV4,
    INVALID_LABEL,
    INVALID_TARGET,
    check_target,
    is_domain_name,
    is_ipv4_literal,
    is_ipv6_literal,
    is_valid_label,
    is_valid_target,
    validate_registration,
)


class TestLabel:
    """Tests for the subdomain label rule."""

    @pytest.mark.parametrize("label", ["a", "7", "alice", "my-site", "a1-b2-c3", "x--y"])
    def test_accepts_valid_labels(self, label):
        assert is_valid_label(label)

    @pytest.mark.parametrize(
        "label",
        ["", "-alice", "alice-", "-", "Alice", "ALICE", "al_ice", "al.ice", "al ice", "é", "alice\n"],
    )
    def test_rejects_invalid_labels(self, label):
        assert not is_valid_label(label)


class TestTargets:
    """Tests for IPv4, IPv6 and domain target syntax."""

    def test_ipv4(self):
        assert is_ipv4_literal("192.168.0.1")

    def test_ipv4_range_is_not_checked(self):
        assert is_ipv4_literal("999.999.999.999")
        assert is_valid_target("999.999.999.999")

    def test_ipv4_rejects_long_groups(self):
        assert not is_ipv4_literal("1234.1.1.1")

    def test_ipv6_full_form(self):
        assert is_ipv6_literal("2001:0db8:0000:0000:0000:ff00:0042:8329")

    def test_ipv6_empty_groups_with_seven_colons(self):
        assert is_ipv6_literal("2001:db8::::::1")

    def test_ipv6_compressed_shorthand_is_rejected(self):
        assert not is_ipv6_literal("2001:db8::1")
        assert not is_ipv6_literal("::1")

    def test_domain_name_case_insensitive(self):
        assert is_domain_name("Example.COM")
        assert is_domain_name("sub.example.co.uk")

    def test_domain_name_rejects_unicode_case_folds(self):
        # Kelvin sign and long s fold to k and s under IGNORECASE
        assert not is_domain_name("\u212aelvin.com")
        assert not is_domain_name("\u017fite.com")
        assert check_target("\u017fite.com", "CNAME") == INVALID_TARGET

    def test_domain_name_rejects_bad_labels(self):
        assert not is_domain_name("-bad.example.com")
        assert not is_domain_name("example..com")
        assert not is_domain_name("example.com.")

    def test_invalid_target(self):
        assert not is_valid_target("not a target!")


class TestCheckTarget:
    """Tests for the target and CNAME cross-field rule."""

    def test_a_record_with_ipv4(self):
        assert check_target("10.0.0.1", "A") is None

    def test_cname_with_domain(self):
        assert check_target("target.example.net", "CNAME") is None

    def test_cname_with_ipv4_is_rejected(self):
        assert check_target("10.0.0.1", "CNAME") == CNAME_TARGETS_IPV4

    def test_record_type_compared_exactly(self):
        # The registrar upper-cases record types before checking
        assert check_target("10.0.0.1", "cname") is None

    def test_invalid_target_message_differs(self):
        assert check_target("bad target", "A") == INVALID_TARGET
        assert INVALID_TARGET != CNAME_TARGETS_IPV4


class TestValidateRegistration:
    """Tests for validate_registration."""

    def test_valid(self):
        result = validate_registration("alice", "203.0.113.7", "A")
        assert result.valid
        assert result.reason is None

    def test_invalid_label_checked_first(self):
        result = validate_registration("-alice", "bad target", "A")
        assert not result.valid
        assert result.reason == INVALID_LABEL

    def test_invalid_target(self):
        result = validate_registration("alice", "bad target", "A")
        assert result.reason == INVALID_TARGET

    def test_cname_ipv4(self):
        result = validate_registration("alice", "10.0.0.1", "CNAME")
        assert not result.valid
        assert result.reason == CNAME_TARGETS_IPV4
