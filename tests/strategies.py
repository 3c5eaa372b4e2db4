"""Shared Hypothesis strategies."""

from __future__ import annotations

from hypothesis import strategies as st

from dragonsay.constants import SLOT_CAPACITY

# Printable single-line text, no surrogates.
single_line_text = st.text(
    alphabet=st.characters(
        blacklist_categories=("Cs", "Cc", "Zl", "Zp"),
    ),
    max_size=4 * SLOT_CAPACITY,
)

short_side_dish = st.text(
    alphabet=st.characters(blacklist_categories=("Cs", "Cc", "Zl", "Zp")),
    max_size=SLOT_CAPACITY,
)

two_slot_side_dish = st.text(
    alphabet=st.characters(blacklist_categories=("Cs", "Cc", "Zl", "Zp")),
    min_size=SLOT_CAPACITY + 1,
    max_size=2 * SLOT_CAPACITY,
)

overflowing_side_dish = st.text(
    alphabet=st.characters(blacklist_categories=("Cs", "Cc", "Zl", "Zp")),
    min_size=2 * SLOT_CAPACITY + 1,
    max_size=6 * SLOT_CAPACITY,
)

terminal_widths = st.integers(min_value=0, max_value=200)

captions = st.lists(st.text(max_size=12), max_size=4)

intervals = st.integers(min_value=10, max_value=5000)
