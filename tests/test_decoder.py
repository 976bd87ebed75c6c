from conftest import frame

from core.card_table import CardTable
from core.cards import CardState, Rank, Suit
from core.decoder import FrameDecoder


def test_identifier_drops_trailing_bytes():
    assert FrameDecoder.identifier(frame("4628F22E1791")) == "4628F22E1791"
    assert FrameDecoder.identifier(b"4B132FA2E1790\x02\x03") == "4B132FA2E1790"


def test_hearts_five():
    decoder = FrameDecoder()
    assert decoder.decode(frame("4628F22E1791")) == CardState(Suit.HEARTS, Rank.FIVE)


def test_fifteen_byte_frame():
    decoder = FrameDecoder()
    # 13-character identifier
    assert decoder.decode(frame("4E42BF22E1790")) == CardState(Suit.CLUBS, Rank.ACE)


def test_trailer_is_not_validated():
    decoder = FrameDecoder()
    assert decoder.decode(b"4628F22E1791zz") == CardState(Suit.HEARTS, Rank.FIVE)


def test_unknown_identifier():
    decoder = FrameDecoder()
    assert decoder.decode(frame("000000000000")) is None


def test_non_ascii_bytes_do_not_raise():
    decoder = FrameDecoder()
    assert decoder.decode(b"\xff" * 12 + b"\r\n") is None


def test_malformed_code_gives_partial_state():
    decoder = FrameDecoder(CardTable({"ABCDEFABCDEF": "9Z"}))
    state = decoder.decode(frame("ABCDEFABCDEF"))
    assert state == CardState(Suit.UNKNOWN, Rank.UNKNOWN)
    assert not state.is_known
