from wordrank.ranking import RankedEntry, WordFrequencyRanker


SAMPLE = "The Go programming language is cc. cc. aaa aaa Go"


def test_tokenize_splits_on_newline_and_single_space() -> None:
    tokens = WordFrequencyRanker.tokenize("a  b\n\nc\tc d\n")
    assert tokens == ["a", "b", "c\tc", "d"]


def test_empty_text_has_no_entries() -> None:
    entries, total = WordFrequencyRanker().rank("")
    assert entries == []
    assert total == 0


def test_sample_sentence_drops_last_ranked_word() -> None:
    entries, total = WordFrequencyRanker().rank(SAMPLE)
    assert total == 6
    assert len(entries) == total
    assert [e.total for e in entries] == [2, 2, 2, 1, 1, 1]
    assert {e.word for e in entries[:3]} == {"Go", "cc.", "aaa"}
    assert entries == [
        RankedEntry("Go", 2),
        RankedEntry("cc.", 2),
        RankedEntry("aaa", 2),
        RankedEntry("The", 1),
        RankedEntry("programming", 1),
        RankedEntry("language", 1),
    ]


def test_ten_distinct_words_returns_nine() -> None:
    text = " ".join(f"w{i}" for i in range(10))
    _, total = WordFrequencyRanker().rank(text)
    assert total == 9


def test_limit_caps_large_vocabularies() -> None:
    words = []
    for i in range(25):
        words.extend([f"w{i}"] * (i + 1))
    entries, total = WordFrequencyRanker().rank(" ".join(words))
    assert total == 10
    assert entries[0] == RankedEntry("w24", 25)
    assert entries[-1] == RankedEntry("w15", 16)


def test_single_repeated_word_is_cut_by_truncation() -> None:
    entries, total = WordFrequencyRanker().rank("hi hi hi")
    assert entries == []
    assert total == 0


def test_case_and_punctuation_are_distinct() -> None:
    counts = WordFrequencyRanker().frequency_table("Go go go. go\ngo")
    assert counts == {"Go": 1, "go": 3, "go.": 1}


def test_counts_sum_to_token_count_and_sorted() -> None:
    text = "x y z x\ny x x  q\n\nr s t u v w a b c d e"
    ranker = WordFrequencyRanker()
    counts = ranker.frequency_table(text)
    assert sum(counts.values()) == len(ranker.tokenize(text))

    entries, _ = ranker.rank(text)
    totals = [e.total for e in entries]
    assert totals == sorted(totals, reverse=True)


def test_rank_is_idempotent() -> None:
    ranker = WordFrequencyRanker()
    assert ranker.rank(SAMPLE) == ranker.rank(SAMPLE)


def test_entry_to_dict() -> None:
    assert RankedEntry("aaa", 2).to_dict() == {"word": "aaa", "total": 2}
