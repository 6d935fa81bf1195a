"""Domain Types & Entities — enum members, identity wrappers, timestamp helpers."""

from datetime import datetime, timedelta, timezone

from congregation.core.domain_types import MemberId, TransactionState, UserId
from congregation.core.entities import (
    ChurchMember, User, as_naive_utc, naive_utc_now, trim_identity, utc_now,
)


def test_identity_types_wrap_int():
    assert UserId(3) == 3
    assert MemberId(4) == 4


def test_transaction_state_has_four_states():
    assert {s.value for s in TransactionState} == {
        "idle", "active", "committed", "rolled_back",
    }


def test_utc_now_is_aware_and_naive_variant_is_not():
    assert utc_now().tzinfo is not None
    assert naive_utc_now().tzinfo is None


def test_as_naive_utc_converts_offsets():
    aware = datetime(2024, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=-3)))
    assert as_naive_utc(aware) == datetime(2024, 3, 1, 15, 0)


def test_as_naive_utc_keeps_naive_values():
    naive = datetime(2024, 3, 1, 12, 0)
    assert as_naive_utc(naive) is naive


def test_member_optional_fields_default_to_none():
    member = ChurchMember(name="Al", email="al@x.com")
    assert member.id is None
    assert member.phone is None
    assert member.joined_at is None


def test_trim_identity_strips_name_and_email_in_place():
    member = ChurchMember(name="  Al ", email=" al@x.com\t")
    trim_identity(member)
    assert member.name == "Al"
    assert member.email == "al@x.com"


def test_trim_identity_turns_missing_values_into_empty_strings():
    user = User(name=None, email=None)
    trim_identity(user)
    assert user.name == ""
    assert user.email == ""
