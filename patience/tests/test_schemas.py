"""
Tests for the pydantic JSON contract.
"""

import pytest
from pydantic import ValidationError

from ..engine_core.action import (
    FlipCard,
    FromFoundation,
    FromTableau,
    FromWaste,
    Move,
    OpenDeck,
    ToFoundation,
    ToTableau,
)
from ..engine_core.cards import Suit
from ..engine_core.reducer import react
from ..schemas import (
    CardInfo,
    TableSnapshot,
    action_to_dict,
    parse_action,
    parse_actions,
)
from .conftest import down, up


class TestCardInfo:
    """Tests for card serialization."""

    def test_from_card(self):
        info = CardInfo.from_card(down("♥10"))
        assert info.key == "♥10"
        assert info.face_down

    def test_to_card_keeps_flag(self):
        card = CardInfo(key="♠Q", face_down=True).to_card()
        assert card == up("♠Q")
        assert card.face_down

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            CardInfo(key="♠Z").to_card()


class TestTableSnapshot:
    """Tests for full table snapshots."""

    def test_from_game_lists_every_zone(self, fresh_game):
        snapshot = TableSnapshot.from_game(fresh_game)

        assert len(snapshot.deck) == 24
        assert snapshot.free_cards == []
        assert set(snapshot.stacks) == {Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES}
        assert [len(bar) for bar in snapshot.bars] == [1, 2, 3, 4, 5, 6, 7]

    def test_json_uses_suit_symbols(self, fresh_game):
        data = TableSnapshot.from_game(fresh_game).model_dump(mode="json")
        assert set(data["stacks"]) == {"♣", "♦", "♥", "♠"}
        assert data["bars"][0][0]["face_down"] is False

    def test_restores_game(self, fresh_game):
        game = react(fresh_game, OpenDeck())
        json_text = TableSnapshot.from_game(game).model_dump_json()
        restored = TableSnapshot.model_validate_json(json_text).to_game()

        assert restored == game
        assert restored.free_cards.top_card.face_down is False
        assert all(card.face_down for card in restored.deck)

    def test_face_down_flags_distinguish_tables(self, fresh_game):
        snapshot = TableSnapshot.from_game(fresh_game)
        turned_up = snapshot.model_copy(update={
            "bars": [[CardInfo(key=info.key) for info in bar] for bar in snapshot.bars],
        })

        assert turned_up.to_game() != fresh_game
        assert snapshot.to_game() == fresh_game

    def test_empty_snapshot_rejected(self):
        with pytest.raises(ValueError):
            TableSnapshot().to_game()

    def test_missing_column_rejected(self, fresh_game):
        snapshot = TableSnapshot.from_game(fresh_game)
        short = snapshot.model_copy(update={"bars": snapshot.bars[:6], "deck": snapshot.deck + snapshot.bars[6]})

        with pytest.raises(ValueError):
            short.to_game()

    def test_short_snapshot_rejected(self, fresh_game):
        snapshot = TableSnapshot.from_game(fresh_game)
        short = snapshot.model_copy(update={"deck": snapshot.deck[1:]})

        with pytest.raises(ValueError):
            short.to_game()

    def test_duplicate_card_rejected(self, fresh_game):
        snapshot = TableSnapshot.from_game(fresh_game)
        duplicated = snapshot.model_copy(update={"deck": [snapshot.deck[1]] + snapshot.deck[1:]})

        with pytest.raises(ValueError):
            duplicated.to_game()


class TestParseAction:
    """Tests for action parsing."""

    def test_open_deck(self):
        assert parse_action({"type": "open-deck"}) == OpenDeck()

    def test_flip_card(self):
        assert parse_action({"type": "flip-card", "column_index": 4}) == FlipCard(column_index=4)

    def test_move_from_tableau_to_foundation(self):
        action = parse_action({
            "type": "move",
            "source": {"type": "tableau", "column_index": 2, "card_index": 4},
            "destination": {"type": "foundation", "suit": "♠"},
        })
        assert action == Move(
            source=FromTableau(column_index=2, card_index=4),
            destination=ToFoundation(suit=Suit.SPADES),
        )

    def test_move_from_waste_to_tableau(self):
        action = parse_action({
            "type": "move",
            "source": {"type": "waste"},
            "destination": {"type": "tableau", "column_index": 0},
        })
        assert action == Move(source=FromWaste(), destination=ToTableau(column_index=0))

    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            parse_action({"type": "undo"})

    def test_unknown_suit(self):
        with pytest.raises(ValidationError):
            parse_action({
                "type": "move",
                "source": {"type": "foundation", "suit": "X"},
                "destination": {"type": "tableau", "column_index": 0},
            })

    def test_negative_index(self):
        with pytest.raises(ValidationError):
            parse_action({"type": "flip-card", "column_index": -1})

    def test_parse_list(self):
        actions = parse_actions([{"type": "open-deck"}, {"type": "flip-card", "column_index": 1}])
        assert actions == [OpenDeck(), FlipCard(column_index=1)]


class TestActionToDict:
    """Tests for serializing engine actions."""

    @pytest.mark.parametrize("action", [
        OpenDeck(),
        FlipCard(column_index=6),
        Move(source=FromFoundation(suit=Suit.HEARTS), destination=ToTableau(column_index=3)),
        Move(source=FromWaste(), destination=ToFoundation(suit=Suit.CLUBS)),
    ])
    def test_parse_inverts_dump(self, action):
        assert parse_action(action_to_dict(action)) == action

    def test_move_shape(self):
        data = action_to_dict(Move(source=FromWaste(), destination=ToFoundation(suit=Suit.CLUBS)))
        assert data == {
            "type": "move",
            "source": {"type": "waste"},
            "destination": {"type": "foundation", "suit": "♣"},
        }
