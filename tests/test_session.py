import pytest
from packages.engine import (
    MAX_ROUNDS, Guess, GuessPosition, PositionStatus, RoundLimitError, Session,
    ValidationError, WordStore,
    parse_feedback, parse_guess,
)

DICT = ["crane", "crate", "brave", "slate", "apple", "berry", "speed", "opera", "trace", "grace",
        "mound", "fizzy", "jumpy"]


def test_round_limit_after_max_rounds():
    session = Session(WordStore.load(DICT))
    for word in ["QQQQQ", "XXXXX", "VVVVV", "WWWWW", "KKKKK"]:
        session.submit(parse_feedback(word, "wwwww"))
    assert session.round == MAX_ROUNDS == 5
    assert session.remaining_rounds == 0

    live_before = list(session.store.live_words())
    with pytest.raises(RoundLimitError):
        session.submit(parse_feedback("crane", "ccccc"))
    assert len(session.history()) == 5
    assert list(session.store.live_words()) == live_before

    with pytest.raises(RoundLimitError):
        session.record(0, "C", PositionStatus.CORRECT)


def test_history_keeps_submission_order():
    session = Session(WordStore.load(DICT))
    g1 = session.submit(parse_feedback("slate", "wwcwc"))
    g2 = session.submit(parse_feedback("trace", "wccmc"))
    assert session.history() == (g1, g2)
    assert isinstance(session.history(), tuple)


def test_top_candidates_in_load_order():
    session = Session(WordStore.load(DICT))
    assert session.top_candidates(3) == ["CRANE", "CRATE", "BRAVE"]
    assert session.top_candidates(0) == []
    assert len(session.top_candidates()) == 10
    assert len(session.top_candidates(100)) == len(DICT)


def test_submit_prunes_and_is_live():
    session = Session(WordStore.load(DICT))
    session.submit(parse_feedback("slate", "wwcwc"))
    assert session.top_candidates() == ["CRANE", "BRAVE", "GRACE"]
    assert session.is_live("grace") is True
    assert session.is_live("SLATE") is False
    with pytest.raises(ValidationError):
        session.is_live("gr@ce")


def test_submit_rejects_wrong_width():
    session = Session(WordStore.load(DICT))
    short = parse_guess(zip("CRAN", "wwww"), N=4)
    with pytest.raises(ValidationError):
        session.submit(short)
    assert session.round == 0
    assert session.store.live_count() == len(DICT)


def test_sessions_do_not_share_state():
    a = Session(WordStore.load(DICT))
    b = Session(WordStore.load(DICT))
    a.submit(parse_feedback("crane", "ccccc"))
    assert a.top_candidates() == ["CRANE"]
    assert b.store.live_count() == len(DICT)


def test_custom_round_budget():
    session = Session(WordStore.load(DICT), max_rounds=1)
    session.submit(parse_feedback("zzzzz", "wwwww"))
    with pytest.raises(RoundLimitError):
        session.submit(parse_feedback("yyyyy", "wwwww"))
    with pytest.raises(ValueError):
        Session(WordStore.load(DICT), max_rounds=0)


def test_submit_rejects_unknown_status_before_pruning():
    session = Session(WordStore.load(DICT))
    guess = Guess(positions=tuple(GuessPosition(ch, PositionStatus.UNKNOWN) for ch in "CRANE"))
    with pytest.raises(ValidationError):
        session.submit(guess)
    assert session.history() == ()
    assert session.store.live_count() == len(DICT)


@pytest.mark.parametrize("letter", ["4", "é", None, "AB"])
def test_submit_rejects_bad_letters(letter):
    session = Session(WordStore.load(DICT))
    slots = [GuessPosition(ch, PositionStatus.WRONG) for ch in "CRAN"] + [
        GuessPosition(letter, PositionStatus.WRONG)]
    with pytest.raises(ValidationError):
        session.submit(Guess(positions=tuple(slots)))
    assert session.round == 0
    assert session.store.live_count() == len(DICT)


def test_submit_uppercases_letters():
    session = Session(WordStore.load(DICT))
    guess = Guess(positions=tuple(GuessPosition(ch, PositionStatus.CORRECT) for ch in "crane"))
    stored = session.submit(guess)
    assert stored.word == "CRANE"
    assert session.history()[0].word == "CRANE"
    assert session.top_candidates() == ["CRANE"]


@pytest.mark.parametrize("position,letter", [(7, "A"), (-1, "A"), (5, "A"), (0, "?"), (0, None)])
def test_record_rejects_bad_slot(position, letter):
    session = Session(WordStore.load(DICT))
    with pytest.raises(ValidationError):
        session.record(position, letter, PositionStatus.WRONG)
    assert session.store.live_count() == len(DICT)
