from packages.engine import (
    PositionStatus, WordStore, apply_guess, finalize_guess, parse_feedback,
    record_position_feedback,
)


def _live(store):
    return list(store.live_words())


def test_complete_letter_rule_argue():
    store = WordStore.load(["ABBOT", "ALOFT", "AMPLE", "ARGUE", "BLAST",
                            "ATOLL", "AORTA", "ANGST", "ALPHA"])
    apply_guess(store, parse_feedback("argue", "cwwww"))
    # A is only Correct, so a second A (ALPHA) is still allowed
    assert _live(store) == ["ABBOT", "ALOFT", "ATOLL", "ALPHA"]


def test_misplaced_letter_is_not_globally_wrong():
    # S is Wrong at 1 and Misplaced at 3
    store = WordStore.load(["BUSTY", "BUTCH", "ISLET", "TRESS", "SHUNT", "BASIS"])
    apply_guess(store, parse_feedback("askso", "wwwmw"))
    assert _live(store) == ["BUSTY", "SHUNT"]


def test_correct_and_wrong_in_same_guess():
    # E Correct at 0, Wrong at 3: E may appear at 0 only
    store = WordStore.load(["EPOCH", "EVENT", "ETHIC", "OPENS"])
    apply_guess(store, parse_feedback("elder", "cwwww"))
    assert _live(store) == ["EPOCH", "ETHIC"]


def test_partial_feedback_prunes_before_finalize():
    store = WordStore.load(["CRANE", "CRATE", "BRAVE", "SLATE"])
    record_position_feedback(store, 0, "C", PositionStatus.CORRECT)
    assert _live(store) == ["CRANE", "CRATE"]
    record_position_feedback(store, 3, "N", PositionStatus.WRONG)
    assert _live(store) == ["CRATE"]


def test_record_position_feedback_is_idempotent():
    store = WordStore.load(["CRANE", "CRATE", "BRAVE", "SLATE"])
    assert record_position_feedback(store, 1, "A", PositionStatus.MISPLACED) == 0
    assert record_position_feedback(store, 0, "B", PositionStatus.MISPLACED) == 4
    assert record_position_feedback(store, 0, "B", PositionStatus.MISPLACED) == 0
    assert record_position_feedback(store, 0, "Z", PositionStatus.UNKNOWN) == 0
    assert _live(store) == []


def test_misplaced_requires_letter_somewhere_but_not_there():
    store = WordStore.load(["CRANE", "BRAVE", "SLATE", "ABBOT"])
    record_position_feedback(store, 0, "B", PositionStatus.MISPLACED)
    assert _live(store) == ["ABBOT"]


def test_finalize_returns_classification():
    store = WordStore.load(["CRANE"])
    cls = finalize_guess(store, parse_feedback("crane", "ccccc"))
    assert cls.correct_positions["C"] == frozenset({0})
    assert _live(store) == ["CRANE"]


def test_complete_letter_scope_is_the_current_guess_only():
    store = WordStore.load(["EPICS", "EMIRS", "STAIR"])
    apply_guess(store, parse_feedback("ebony", "cwwww"))
    assert _live(store) == ["EPICS", "EMIRS"]

    # E is Wrong (never Correct) in this guess, so its allowed set is empty
    # even though the previous guess fixed E at 0. Honest feedback would
    # mark this E Misplaced; a Wrong here empties the store.
    apply_guess(store, parse_feedback("lathe", "wwwww"))
    assert _live(store) == []
