"""
Pydantic Schemas - The JSON contract between the engine and its callers.

The renderer and input layer talk to the engine in plain JSON:
- Table snapshots list every zone as card keys ("♣A", "♥10")
- Actions are tagged objects: {"type": "move", "source": {...}, ...}

Parsing goes through pydantic so malformed input fails with a
ValidationError before it ever reaches the reducer.
"""

from __future__ import annotations
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from .engine_core.action import (
    Action,
    FlipCard,
    FromFoundation,
    FromTableau,
    FromWaste,
    Move,
    OpenDeck,
    ToFoundation,
    ToTableau,
)
from .engine_core.cards import ALL_SUITS, Card, Suit, from_key, key
from .engine_core.errors import EngineInvariantError
from .engine_core.state import BARS_COUNT, Game, Pile, check_invariants


# =============================================================================
# Table snapshot
# =============================================================================

class CardInfo(BaseModel):
    """Card information for display."""
    key: str = Field(description="Suit symbol followed by rank symbol")
    face_down: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_card(cls, card: Card) -> CardInfo:
        return cls(key=key(card), face_down=card.face_down)

    def to_card(self) -> Card:
        return from_key(self.key).flipped(face_down=self.face_down)


def _pile_info(pile: Pile) -> list[CardInfo]:
    return [CardInfo.from_card(card) for card in pile]


def _pile(cards: list[CardInfo]) -> Pile:
    return Pile(cards=[info.to_card() for info in cards])


class TableSnapshot(BaseModel):
    """Every zone of a Game, bottom card first."""
    deck: list[CardInfo] = Field(default_factory=list)
    free_cards: list[CardInfo] = Field(default_factory=list)
    stacks: dict[Suit, list[CardInfo]] = Field(default_factory=dict)
    bars: list[list[CardInfo]] = Field(default_factory=list)

    @classmethod
    def from_game(cls, game: Game) -> TableSnapshot:
        return cls(
            deck=_pile_info(game.deck),
            free_cards=_pile_info(game.free_cards),
            stacks={suit: _pile_info(game.stacks[suit]) for suit in ALL_SUITS},
            bars=[_pile_info(bar) for bar in game.bars],
        )

    def to_game(self) -> Game:
        """
        Rebuild the Game this snapshot describes.

        Raises:
            ValueError: If the snapshot is not a full, well-formed table
        """
        if len(self.bars) != BARS_COUNT:
            raise ValueError(f"A table has {BARS_COUNT} columns, snapshot has {len(self.bars)}")
        game = Game(
            deck=_pile(self.deck),
            free_cards=_pile(self.free_cards),
            stacks={suit: _pile(cards) for suit, cards in self.stacks.items()},
            bars=tuple(_pile(bar) for bar in self.bars),
        )
        try:
            check_invariants(game)
        except EngineInvariantError as e:
            raise ValueError(f"Snapshot is not a valid table: {e}") from e
        return game


# =============================================================================
# Move sources and destinations
# =============================================================================

class WasteSource(BaseModel):
    type: Literal["waste"] = "waste"

    def to_source(self) -> FromWaste:
        return FromWaste()


class FoundationSource(BaseModel):
    type: Literal["foundation"] = "foundation"
    suit: Suit

    def to_source(self) -> FromFoundation:
        return FromFoundation(suit=self.suit)


class TableauSource(BaseModel):
    type: Literal["tableau"] = "tableau"
    column_index: int = Field(ge=0)
    card_index: int = Field(ge=0)

    def to_source(self) -> FromTableau:
        return FromTableau(column_index=self.column_index, card_index=self.card_index)


SourceModel = Annotated[
    Union[WasteSource, FoundationSource, TableauSource],
    Field(discriminator="type"),
]


class FoundationDestination(BaseModel):
    type: Literal["foundation"] = "foundation"
    suit: Suit

    def to_destination(self) -> ToFoundation:
        return ToFoundation(suit=self.suit)


class TableauDestination(BaseModel):
    type: Literal["tableau"] = "tableau"
    column_index: int = Field(ge=0)

    def to_destination(self) -> ToTableau:
        return ToTableau(column_index=self.column_index)


DestinationModel = Annotated[
    Union[FoundationDestination, TableauDestination],
    Field(discriminator="type"),
]


# =============================================================================
# Actions
# =============================================================================

class MoveRequest(BaseModel):
    """Move a card or run."""
    type: Literal["move"] = "move"
    source: SourceModel
    destination: DestinationModel

    def to_action(self) -> Move:
        return Move(
            source=self.source.to_source(),
            destination=self.destination.to_destination(),
        )


class OpenDeckRequest(BaseModel):
    """Draw from the stock."""
    type: Literal["open-deck"] = "open-deck"

    def to_action(self) -> OpenDeck:
        return OpenDeck()


class FlipCardRequest(BaseModel):
    """Turn up a column's last card."""
    type: Literal["flip-card"] = "flip-card"
    column_index: int = Field(ge=0)

    def to_action(self) -> FlipCard:
        return FlipCard(column_index=self.column_index)


ActionRequest = Annotated[
    Union[MoveRequest, OpenDeckRequest, FlipCardRequest],
    Field(discriminator="type"),
]

_action_adapter = TypeAdapter(ActionRequest)
_actions_adapter = TypeAdapter(list[ActionRequest])


def parse_action(data: dict[str, Any]) -> Action:
    """
    Parse an action from a dictionary.

    Raises:
        pydantic.ValidationError: If the type is unknown or fields are invalid
    """
    return _action_adapter.validate_python(data).to_action()


def parse_actions(data: list[dict[str, Any]]) -> list[Action]:
    """Parse a list of actions from dictionaries."""
    return [request.to_action() for request in _actions_adapter.validate_python(data)]


def action_to_request(action: Action) -> MoveRequest | OpenDeckRequest | FlipCardRequest:
    """Build the request model for an engine action."""
    if isinstance(action, OpenDeck):
        return OpenDeckRequest()
    if isinstance(action, FlipCard):
        return FlipCardRequest(column_index=action.column_index)

    source = action.source
    if isinstance(source, FromWaste):
        source_model = WasteSource()
    elif isinstance(source, FromFoundation):
        source_model = FoundationSource(suit=source.suit)
    else:
        source_model = TableauSource(column_index=source.column_index, card_index=source.card_index)

    destination = action.destination
    if isinstance(destination, ToFoundation):
        destination_model = FoundationDestination(suit=destination.suit)
    else:
        destination_model = TableauDestination(column_index=destination.column_index)

    return MoveRequest(source=source_model, destination=destination_model)


def action_to_dict(action: Action) -> dict[str, Any]:
    """JSON-ready form of an action, the inverse of parse_action()."""
    return action_to_request(action).model_dump(mode="json")
