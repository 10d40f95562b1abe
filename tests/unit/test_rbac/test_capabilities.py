# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the capability vocabulary."""

from dispatchdesk.rbac.capabilities import (
    CAPABILITY_DESCRIPTIONS,
    CAPABILITY_KEYS,
    Capability,
    empty_capability_set,
    full_capability_set,
    is_known_capability,
    normalize_capabilities,
)


def test_vocabulary_is_complete_and_described():
    assert len(CAPABILITY_KEYS) == 21
    assert set(CAPABILITY_DESCRIPTIONS) == set(Capability)
    assert "manageTechnicians" in CAPABILITY_KEYS
    assert "viewLogs" in CAPABILITY_KEYS


def test_is_known_capability():
    assert is_known_capability("createTickets") is True
    assert is_known_capability("flyToTheMoon") is False
    assert is_known_capability("CreateTickets") is False


def test_empty_and_full_sets_cover_every_key():
    assert set(empty_capability_set()) == set(CAPABILITY_KEYS)
    assert not any(empty_capability_set().values())
    assert all(full_capability_set().values())


def test_normalize_fills_missing_and_drops_unknown():
    result = normalize_capabilities({"viewTickets": True, "bogus": True})
    assert set(result) == set(CAPABILITY_KEYS)
    assert result["viewTickets"] is True
    assert result["createTickets"] is False
    assert "bogus" not in result


def test_normalize_only_counts_true_booleans():
    result = normalize_capabilities({"viewTickets": "yes", "viewCalendar": 1})
    assert result["viewTickets"] is False
    assert result["viewCalendar"] is False


def test_normalize_returns_a_copy():
    raw = {"viewTickets": True}
    result = normalize_capabilities(raw)
    result["viewTickets"] = False
    assert raw["viewTickets"] is True
