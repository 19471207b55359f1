from packages.harness import run_batch, run_case

WORDS = ["slate", "trace", "crane", "crate", "grace", "brave"]
OPENERS = ["slate", "trace", "crane"]


def test_run_case_smoke():
    r = run_case("crane", OPENERS, words=WORDS)
    assert r["success"] is True
    assert r["guesses"] == 3
    assert r["history"] == [("SLATE", "wwcwc"), ("TRACE", "wccmc"), ("CRANE", "ccccc")]
    assert r["live_counts"] == [3, 1, 1]
    assert r["answer_live"] is True


def test_run_batch_answer_never_scrubbed():
    results = run_batch(WORDS, OPENERS, words=WORDS)
    assert len(results) == len(WORDS)
    for r in results:
        assert r["answer_live"] is True, r
        counts = r["live_counts"]
        assert counts == sorted(counts, reverse=True)


def test_run_case_respects_exclusions():
    r = run_case("grace", OPENERS, words=WORDS, exclusions=["grace"])
    assert r["answer_live"] is False
    assert r["success"] is False
