"""
Table State - The immutable snapshot of every card's location.

Design principles:
- Immutable: every change returns a new Game, nothing is mutated in place
- Complete: the four zones together always hold exactly the 52 cards
- Stateless engine: the caller owns the "current" Game and threads it

Zones:
- deck: the stock, face-down, drawn from its end
- free_cards: the waste, face-up, only its last card is playable
- stacks: one foundation per suit, ascending from Ace
- bars: the seven tableau columns
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from .cards import ALL_SUITS, Card, Suit, key
from .errors import EngineInvariantError

BARS_COUNT = 7
DECK_SIZE = 52


@dataclass(frozen=True, eq=False)
class Pile:
    """
    An ordered run of cards; the last card is the top.

    Mirrors a stack of physical cards: additions and removals happen at
    the end, and each operation returns a new Pile.
    """
    cards: tuple[Card, ...] = ()

    def __post_init__(self):
        if not isinstance(self.cards, tuple):
            object.__setattr__(self, "cards", tuple(self.cards))

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __getitem__(self, index):
        return self.cards[index]

    def _faces(self) -> tuple[tuple[Card, bool], ...]:
        return tuple((card, card.face_down) for card in self.cards)

    def __eq__(self, other):
        if not isinstance(other, Pile):
            return NotImplemented
        return self._faces() == other._faces()

    def __hash__(self):
        return hash(self._faces())

    @property
    def top_card(self) -> Card | None:
        """Get the top card of the pile."""
        return self.cards[-1] if self.cards else None

    @property
    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def add_top(self, card: Card) -> Pile:
        """Return new pile with card added on top."""
        return Pile(cards=self.cards + (card,))

    def add_all(self, cards: Iterable[Card]) -> Pile:
        """Return new pile with cards added on top, in order."""
        return Pile(cards=self.cards + tuple(cards))

    def remove_top(self) -> tuple[Card | None, Pile]:
        """Return (removed card, new pile)."""
        if not self.cards:
            return None, self
        return self.cards[-1], Pile(cards=self.cards[:-1])

    def split_at(self, index: int) -> tuple[Pile, Pile]:
        """Return (cards below index, cards from index to the top)."""
        return Pile(cards=self.cards[:index]), Pile(cards=self.cards[index:])

    def replace_top(self, card: Card) -> Pile:
        """Return new pile with the top card swapped for card."""
        return Pile(cards=self.cards[:-1] + (card,))


def _empty_stacks() -> Mapping[Suit, Pile]:
    return {suit: Pile() for suit in ALL_SUITS}


@dataclass(frozen=True)
class Game:
    """
    Complete table state at a point in time.

    This is the value the reducer consumes and produces. Two Games are
    equal when every zone holds the same cards in the same order, each
    face-up or face-down alike.
    """
    deck: Pile = field(default_factory=Pile)
    free_cards: Pile = field(default_factory=Pile)
    stacks: Mapping[Suit, Pile] = field(default_factory=_empty_stacks)
    bars: tuple[Pile, ...] = field(
        default_factory=lambda: tuple(Pile() for _ in range(BARS_COUNT))
    )

    def __post_init__(self):
        # Accept plain lists and dicts from callers, store read-only forms
        for name in ("deck", "free_cards"):
            value = getattr(self, name)
            if not isinstance(value, Pile):
                object.__setattr__(self, name, Pile(cards=value))
        stacks = {suit: Pile() for suit in ALL_SUITS}
        for suit, pile in dict(self.stacks).items():
            stacks[suit] = pile if isinstance(pile, Pile) else Pile(cards=pile)
        object.__setattr__(self, "stacks", MappingProxyType(stacks))
        object.__setattr__(
            self,
            "bars",
            tuple(bar if isinstance(bar, Pile) else Pile(cards=bar) for bar in self.bars),
        )

    def __hash__(self):
        stacks = tuple((suit, self.stacks[suit]) for suit in ALL_SUITS)
        return hash((self.deck, self.free_cards, stacks, self.bars))

    def with_bar(self, bar_index: int, bar: Pile) -> Game:
        """Return new state with one tableau column replaced."""
        bars = list(self.bars)
        bars[bar_index] = bar
        return self._copy_with(bars=tuple(bars))

    def with_stack(self, suit: Suit, stack: Pile) -> Game:
        """Return new state with one foundation replaced."""
        stacks = dict(self.stacks)
        stacks[suit] = stack
        return self._copy_with(stacks=stacks)

    def _copy_with(self, **kwargs) -> Game:
        """Create a copy with some fields replaced."""
        return Game(
            deck=kwargs.get("deck", self.deck),
            free_cards=kwargs.get("free_cards", self.free_cards),
            stacks=kwargs.get("stacks", self.stacks),
            bars=kwargs.get("bars", self.bars),
        )

    def all_cards(self) -> list[Card]:
        """Every card on the table: stock, waste, foundations, then columns."""
        cards = list(self.deck) + list(self.free_cards)
        for suit in ALL_SUITS:
            cards.extend(self.stacks[suit])
        for bar in self.bars:
            cards.extend(bar)
        return cards


def check_invariants(game: Game) -> None:
    """
    Verify the structural invariants of a table state.

    - Conservation: the zones hold exactly 52 distinct cards.
    - Face-down tail: in each column the face-down cards form a prefix.
      A column whose last card is face-down is waiting for a FlipCard.
    - Foundations hold only cards of their own suit.

    Raises:
        EngineInvariantError: On the first violation found
    """
    cards = game.all_cards()
    if len(cards) != DECK_SIZE:
        raise EngineInvariantError(f"Table holds {len(cards)} cards, expected {DECK_SIZE}")
    duplicates = [key(card) for card, count in Counter(cards).items() if count > 1]
    if duplicates:
        raise EngineInvariantError(f"Duplicate cards on table: {', '.join(duplicates)}")

    for bar_index, bar in enumerate(game.bars):
        seen_face_up = False
        for card in bar:
            if not card.face_down:
                seen_face_up = True
            elif seen_face_up:
                raise EngineInvariantError(
                    f"Column {bar_index} has face-down {key(card)} above a face-up card"
                )

    for suit, stack in game.stacks.items():
        for card in stack:
            if card.suit != suit:
                raise EngineInvariantError(f"{key(card)} found on the {suit.value} foundation")
