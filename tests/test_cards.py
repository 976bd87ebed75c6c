from core.cards import CardState, Rank, Suit, RANK_CODES, SUIT_CODES


def test_clubs_ace_payload():
    state = CardState.from_code("11")
    assert state == CardState(Suit.CLUBS, Rank.ACE)
    assert state.to_payload() == {"suit": "CLUBS", "rank": "ACE"}


def test_letter_ranks():
    assert CardState.from_code("3A").rank is Rank.TEN
    assert CardState.from_code("3B").rank is Rank.JACK
    assert CardState.from_code("3C").rank is Rank.QUEEN
    assert CardState.from_code("3D").rank is Rank.KING


def test_every_suit_digit():
    assert [CardState.from_code(f"{d}1").suit for d in "1234"] == [
        Suit.CLUBS, Suit.SPADES, Suit.DIAMONDS, Suit.HEARTS
    ]


def test_unrecognised_characters_are_unknown():
    assert CardState.from_code("51") == CardState(Suit.UNKNOWN, Rank.ACE)
    assert CardState.from_code("1E") == CardState(Suit.CLUBS, Rank.UNKNOWN)
    assert CardState.from_code("1a").rank is Rank.UNKNOWN
    assert CardState.from_code("0") == CardState.unknown()
    assert CardState.from_code("") == CardState.unknown()


def test_is_known():
    assert CardState(Suit.HEARTS, Rank.FIVE).is_known
    assert not CardState(Suit.HEARTS, Rank.UNKNOWN).is_known
    assert not CardState(Suit.UNKNOWN, Rank.FIVE).is_known
    assert not CardState.unknown().is_known


def test_value_equality_and_hashing():
    a = CardState(Suit.SPADES, Rank.KING)
    b = CardState.from_code("2D")
    assert a == b
    assert len({a, b}) == 1
    assert str(a) == "SPADES KING"


def test_mappings_cover_a_full_deck():
    assert len(SUIT_CODES) == 4
    assert len(RANK_CODES) == 13
    assert Suit.UNKNOWN not in SUIT_CODES.values()
    assert Rank.UNKNOWN not in RANK_CODES.values()
