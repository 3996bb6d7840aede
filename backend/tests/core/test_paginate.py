"""Paginator: windowing, page-size normalization, token resolution.

Tests cover:
    - No-options identity (whole collection, no tokens)
    - Page splitting and token round-trip
    - Invalid / negative / out-of-range tokens fall back to first page
    - Page-size defaulting and clamping
    - Result invariants, idempotence, monotonic token chaining
"""

import pytest

from netpager.core.paginate import (
    PaginationOptions,
    paginate,
    parse_page_token,
    resolve_page_size,
    resolve_start_index,
)


def _items(n: int) -> list[int]:
    return list(range(n))


def _assert_invariants(result):
    assert 0 <= result.start_index <= result.end_index <= result.total
    assert len(result.items) == result.end_index - result.start_index
    assert (result.next_page_token is not None) == (result.end_index < result.total)
    assert (result.previous_page_token is not None) == (result.start_index > 0)


# ─── No pagination requested ────────────────────────────────────

@pytest.mark.parametrize("options", [None, PaginationOptions()])
def test_no_options_returns_everything(options):
    result = paginate(_items(5), options)
    assert result.items == (0, 1, 2, 3, 4)
    assert result.start_index == 0
    assert result.end_index == 5
    assert result.total == 5
    assert result.next_page_token is None
    assert result.previous_page_token is None
    assert result.invalid_token is False


def test_no_options_skips_size_limit_for_large_collections():
    result = paginate(_items(500))
    assert len(result.items) == 500
    assert result.next_page_token is None


def test_no_options_on_empty_collection():
    result = paginate([])
    assert result.items == ()
    assert result.end_index == 0
    _assert_invariants(result)


# ─── Windowing and tokens ───────────────────────────────────────

def test_first_page_of_30_with_size_10():
    result = paginate(_items(30), PaginationOptions(page_size=10))
    assert result.items == tuple(range(10))
    assert result.next_page_token == "10"
    assert result.previous_page_token is None
    _assert_invariants(result)


def test_token_round_trip_on_25_items():
    result = paginate(_items(25), PaginationOptions(page_size=10, page_token="10"))
    assert result.items == tuple(range(10, 20))
    assert result.start_index == 10
    assert result.end_index == 20
    assert result.next_page_token == "20"
    assert result.previous_page_token == "0"
    _assert_invariants(result)


def test_last_partial_page_has_no_next_token():
    result = paginate(_items(25), PaginationOptions(page_size=10, page_token="20"))
    assert result.items == (20, 21, 22, 23, 24)
    assert result.next_page_token is None
    assert result.previous_page_token == "10"


def test_previous_token_uses_current_page_size():
    # reached offset 15 with size 5, now asking size 10: steps back 10
    result = paginate(_items(40), PaginationOptions(page_size=10, page_token="15"))
    assert result.previous_page_token == "5"


def test_previous_token_never_negative():
    result = paginate(_items(40), PaginationOptions(page_size=10, page_token="3"))
    assert result.previous_page_token == "0"


def test_token_without_page_size_returns_rest_of_collection():
    result = paginate(_items(8), PaginationOptions(page_token="3"))
    assert result.items == (3, 4, 5, 6, 7)
    assert result.next_page_token is None
    assert result.previous_page_token == "0"


# ─── Invalid tokens ─────────────────────────────────────────────

@pytest.mark.parametrize("token", ["invalid", "-1", "5", "99", "", "x3", "7abc"])
def test_invalid_token_falls_back_to_first_page(token):
    result = paginate(_items(5), PaginationOptions(page_size=2, page_token=token))
    assert result.invalid_token is True
    assert result.start_index == 0
    assert result.items == (0, 1)
    _assert_invariants(result)


def test_token_on_empty_collection_is_flagged_invalid():
    result = paginate([], PaginationOptions(page_size=5, page_token="0"))
    assert result.invalid_token is True
    assert result.items == ()
    assert result.next_page_token is None
    _assert_invariants(result)


def test_valid_token_is_not_flagged():
    result = paginate(_items(5), PaginationOptions(page_size=2, page_token="4"))
    assert result.invalid_token is False
    assert result.items == (4,)


# ─── Page-size normalization ────────────────────────────────────

def test_unspecified_size_defaults_to_total():
    assert resolve_page_size(None, 37) == 37


def test_unspecified_size_on_empty_collection_uses_default():
    assert resolve_page_size(None, 0) == 20
    assert resolve_page_size(None, 0, default_page_size=7) == 7


@pytest.mark.parametrize("size", [0, -3, 2.5, "10", True])
def test_invalid_size_falls_back_to_default(size):
    assert resolve_page_size(size, 100) == 20


def test_size_clamped_to_collection_size():
    assert resolve_page_size(50, 12) == 12


def test_size_never_zero_for_empty_collection():
    assert resolve_page_size(10, 0) == 1


def test_invalid_size_uses_configured_default():
    result = paginate(
        _items(30), PaginationOptions(page_size=0), default_page_size=7,
    )
    assert len(result.items) == 7
    assert result.next_page_token == "7"


# ─── Token parsing ──────────────────────────────────────────────

def test_parse_page_token_accepts_base10_integers():
    assert parse_page_token("10") == 10
    assert parse_page_token(" 7 ") == 7
    assert parse_page_token("-2") == -2


@pytest.mark.parametrize(
    "token, expected",
    [("1.5", 1), ("3abc", 3), ("10abc", 10), ("1e3", 1), ("0x10", 0), ("4.0", 4)],
)
def test_parse_page_token_reads_leading_integer(token, expected):
    assert parse_page_token(token) == expected


@pytest.mark.parametrize("token", ["", "   ", "abc", ".5", "x10", None, 4])
def test_parse_page_token_rejects_tokens_without_leading_integer(token):
    assert parse_page_token(token) is None


def test_token_with_trailing_text_resumes_at_its_integer_prefix():
    result = paginate(_items(25), PaginationOptions(page_size=10, page_token="10abc"))
    assert result.invalid_token is False
    assert result.start_index == 10
    assert result.items == tuple(range(10, 20))
    _assert_invariants(result)


def test_fractional_token_truncates_to_integer_prefix():
    result = paginate(_items(5), PaginationOptions(page_size=2, page_token="1.5"))
    assert result.invalid_token is False
    assert result.items == (1, 2)


def test_resolve_start_index_without_token():
    assert resolve_start_index(None, 0) == (0, False)


# ─── Properties ─────────────────────────────────────────────────

def test_repeated_calls_are_identical():
    items = _items(25)
    options = PaginationOptions(page_size=10, page_token="10")
    assert paginate(items, options) == paginate(items, options)


@pytest.mark.parametrize("n,size", [(0, 3), (1, 1), (10, 3), (30, 10), (31, 10)])
def test_following_next_tokens_visits_every_item_once(n, size):
    items = _items(n)
    seen: list[int] = []
    token = None
    for _ in range(n + 2):
        result = paginate(items, PaginationOptions(page_size=size, page_token=token))
        _assert_invariants(result)
        seen.extend(result.items)
        token = result.next_page_token
        if token is None:
            break
    assert seen == items


def test_tokens_stay_valid_after_append():
    items = _items(20)
    first = paginate(items, PaginationOptions(page_size=10))
    items.extend(range(20, 25))
    second = paginate(items, PaginationOptions(page_size=10, page_token=first.next_page_token))
    assert second.invalid_token is False
    assert second.items == tuple(range(10, 20))
    assert second.next_page_token == "20"


def test_input_is_not_mutated():
    items = _items(10)
    paginate(items, PaginationOptions(page_size=3, page_token="3"))
    assert items == list(range(10))
