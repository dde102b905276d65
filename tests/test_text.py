import math

import numpy as np
import pytest

from mlplus import text


def test_to_lower():
    assert text.to_lower("HeLLo World") == "hello world"


def test_split_characters():
    assert text.split("abc") == ["a", "b", "c"]


def test_split_sentences_drops_unterminated_tail():
    assert text.split_sentences("One. Two. Three") == ["One.", "Two."]


def test_split_sentences_keeps_ellipsis():
    assert text.split_sentences("Wait... ok.") == ["Wait...", "ok."]


def test_remove_spaces():
    assert text.remove_spaces(["a b", " c "]) == ["ab", "c"]


def test_remove_null_byte():
    assert text.remove_null_byte(["a", "", "b", ""]) == ["a", "b"]


def test_segment_punctuation():
    assert text.segment("hello, world") == ["hello", ",", "world"]


def test_segment_trailing_punctuation():
    assert text.segment("Hi there!") == ["Hi", "there", "!"]


def test_segment_double_space_yields_empty():
    assert text.segment("a  b") == ["a", "", "b"]


def test_tokenize_repeats_share_ids():
    tokens = text.tokenize("the cat saw the cat")
    assert tokens == [1.0, 2.0, 3.0, 1.0, 2.0]


def test_tokenize_distinct_count_matches_unique():
    sentence = "a b c a d b"
    assert max(text.tokenize(sentence)) == len(text.unique(text.segment(sentence)))


def test_remove_stop_words_from_text():
    assert text.remove_stop_words("The cat is on the mat") == ["cat", "mat"]


def test_remove_stop_words_from_segments_keeps_case():
    assert text.remove_stop_words(["I", "me", "dog"]) == ["I", "dog"]


def test_remove_stop_words_result_has_no_stop_words():
    result = text.remove_stop_words("We were there because it was here and now")
    assert result == []


def test_stemming_strips_suffixes():
    assert text.stemming("kindness helps") == "kind helps"
    assert text.stemming("quickly walked") == "quick walk"


def test_stemming_keeps_delimiters():
    assert text.stemming("walked, talked.") == "walk, talk."


def test_unique_preserves_order():
    assert text.unique([3, 1, 3, 2, 1]) == [3, 1, 2]


def test_create_word_list():
    words = text.create_word_list(["The cat sat.", "The dog sat."])
    assert words == ["cat", "sat", ".", "dog"]


SENTENCES = ["The cat sat.", "The cat cat."]


def test_bag_of_words_counts():
    bow = text.bag_of_words(SENTENCES)
    np.testing.assert_array_equal(bow, [[1, 1, 1], [2, 0, 1]])


def test_bag_of_words_binary():
    bow = text.bag_of_words(SENTENCES, "Binary")
    np.testing.assert_array_equal(bow, [[1, 1, 1], [1, 0, 1]])


def test_tfidf_common_words_vanish():
    scores = text.tfidf(SENTENCES)
    assert scores.shape == (2, 3)
    # "cat" and "." occur in every sentence
    np.testing.assert_allclose(scores[:, 0], 0.0)
    np.testing.assert_allclose(scores[:, 2], 0.0)
    assert scores[0, 1] == pytest.approx(math.log(2) / 3)
    assert scores[1, 1] == 0.0


def test_lsa_reconstructs_gram_matrix():
    sentences = ["The cat sat.", "The dog ran.", "A cat ran."]
    bow = text.bag_of_words(sentences, "Binary")
    full = min(bow.shape)
    emb = text.lsa(sentences, full)
    assert emb.shape == (full, bow.shape[1])
    np.testing.assert_allclose(emb.T @ emb, bow.T @ bow, atol=1e-9)


def test_lsa_rejects_large_dim():
    with pytest.raises(ValueError):
        text.lsa(SENTENCES, 10)