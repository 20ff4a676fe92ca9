"""
Tests for special card effects.

resolve_effects is checked table-driven against every rank; apply_effects is
checked against a small hand-built table.
"""

import pytest

from unoduel.engine import (
    Color,
    ForceDraw,
    Hand,
    Piles,
    Rank,
    RequireColorChoice,
    Seat,
    SkipNextTurn,
    Table,
    ToggleDirection,
    apply_effects,
    resolve_effects,
)
from unoduel.engine.events import CardDrawn, ColorChanged, DrawFailed, EffectApplied, EffectKind, TurnSkipped
from tests.helpers import NoShuffle, c

A, B = Seat.A, Seat.B


@pytest.mark.parametrize(
    "card, expected",
    [
        (c("red", "0"), []),
        (c("blue", "9"), []),
        (c("green", "skip"), [SkipNextTurn(B)]),
        (c("yellow", "reverse"), [ToggleDirection(), SkipNextTurn(B)]),
        (c("red", "draw_two"), [ForceDraw(B, 2), SkipNextTurn(B)]),
        (c("wild", "draw_four"), [ForceDraw(B, 4), RequireColorChoice(A), SkipNextTurn(B)]),
        (c("wild", "color_change"), [RequireColorChoice(A)]),
    ],
)
def test_resolve_effects(card, expected) -> None:
    assert resolve_effects(card, played_by=A, against=B) == expected


def test_every_number_rank_has_no_effect() -> None:
    for rank in Rank:
        if rank.value.isdigit():
            assert resolve_effects(c("red", rank.value), A, B) == []


def make_table(top, draw=(), hand_b=()):
    piles = Piles(draw=draw, rng=NoShuffle())
    piles.place_on_discard(top)
    table = Table(piles=piles)
    table.hands[B] = Hand(hand_b)
    return table


def no_color(seat):
    raise AssertionError("no color choice expected")


class TestApplyEffects:
    def test_number_card(self) -> None:
        table = make_table(c("red", "5"))
        assert apply_effects([], table, no_color) == 0
        assert table.history == []

    def test_draw_two(self) -> None:
        table = make_table(c("red", "draw_two"), draw=[c("blue", "1"), c("blue", "2"), c("blue", "3")], hand_b=[c("green", "4")])
        skips = apply_effects(resolve_effects(c("red", "draw_two"), A, B), table, no_color)
        assert skips == 1
        assert len(table.hand(B)) == 3
        assert table.hand(B).cards[1:] == (c("blue", "1"), c("blue", "2"))
        assert table.piles.draw_count == 1
        forced = [e for e in table.history if isinstance(e, CardDrawn)]
        assert all(e.forced and e.seat is B for e in forced)
        assert EffectApplied(EffectKind.FORCE_DRAW, B, 2) in table.history
        assert TurnSkipped(B) in table.history

    def test_forced_draw_is_never_played(self) -> None:
        # Even a playable wild drawn as a penalty stays in the hand
        table = make_table(c("red", "draw_two"), draw=[c("wild", "draw_four"), c("red", "1")])
        apply_effects([ForceDraw(B, 2)], table, no_color)
        assert table.hand(B).cards == (c("wild", "draw_four"), c("red", "1"))
        assert table.top_card() == c("red", "draw_two")

    def test_draw_four_recolors_top(self) -> None:
        table = make_table(c("wild", "draw_four"), draw=[c("blue", str(n)) for n in range(5)])
        chosen = []

        def choose(seat):
            chosen.append(seat)
            return Color.GREEN

        skips = apply_effects(resolve_effects(c("wild", "draw_four"), A, B), table, choose)
        assert skips == 1
        assert chosen == [A]
        assert len(table.hand(B)) == 4
        assert table.top_card().color is Color.GREEN
        assert table.top_card().rank is Rank.DRAW_FOUR
        assert ColorChanged(A, Color.GREEN) in table.history

    def test_color_change(self) -> None:
        table = make_table(c("wild", "color_change"))
        skips = apply_effects(resolve_effects(c("wild", "color_change"), A, B), table, lambda seat: Color.BLUE)
        assert skips == 0
        assert table.top_card().color is Color.BLUE

    def test_reverse_toggles_direction_and_skips(self) -> None:
        table = make_table(c("green", "reverse"))
        assert table.turns.direction == 1
        skips = apply_effects(resolve_effects(c("green", "reverse"), A, B), table, no_color)
        assert skips == 1
        assert table.turns.direction == -1
        assert EffectApplied(EffectKind.REVERSE, None) in table.history

    def test_forced_draw_with_empty_deck(self) -> None:
        table = make_table(c("red", "draw_two"), draw=[c("blue", "1")], hand_b=[c("green", "4")])
        skips = apply_effects(resolve_effects(c("red", "draw_two"), A, B), table, no_color)
        assert skips == 1
        assert len(table.hand(B)) == 2
        assert DrawFailed(seat=B, forced=True) in table.history

    def test_forced_draw_recycles_discards(self) -> None:
        piles = Piles(rng=NoShuffle())
        piles.place_on_discard(c("red", "1"))
        piles.place_on_discard(c("red", "2"))
        piles.place_on_discard(c("red", "draw_two"))
        table = Table(piles=piles)
        apply_effects([ForceDraw(B, 2)], table, no_color)
        assert table.hand(B).cards == (c("red", "1"), c("red", "2"))
        assert table.top_card() == c("red", "draw_two")
        assert [e.event_type for e in table.history].count("deck_recycled") == 1
