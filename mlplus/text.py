"""Text preprocessing: segmentation, stop words, stemming and document vectors."""

from __future__ import annotations

import re
from typing import Hashable, Iterable, Sequence, TypeVar, Union

import numpy as np

T = TypeVar("T", bound=Hashable)

STOP_WORDS = frozenset(
    """
    i me my myself we our ours ourselves you your yours yourself yourselves he
    him his himself she her hers herself it its itself they them their theirs
    themselves what which who whom this that these those am is are was were be
    been being have has had having do does did doing a an the and but if or
    because as until while of at by for with about against between into through
    during before after above below to from up down in out on off over under
    again further then once here there when where why how all any both each few
    more most other some such no nor not only own same so than too very s t can
    will just don should now
    """.split()
)

SUFFIXES = (
    "eer", "er", "ion", "ity", "ment", "ness", "or", "sion", "ship", "th",
    "able", "ible", "al", "ant", "ary", "ful", "ic", "ious", "ous", "ive",
    "less", "y", "ed", "en", "ing", "ize", "ise", "ly", "ward", "wise",
)
_SUFFIX_SET = frozenset(SUFFIXES)

_PUNCTUATION = frozenset(",!.-")
_WORD = re.compile(r"[^ ,\-.!]+")


def to_lower(text: str) -> str:
    return text.lower()


def split(text: str) -> list[str]:
    """The characters of ``text``, one per item."""
    return list(text)


def split_sentences(data: str) -> list[str]:
    """Split text into sentences that end with a period.

    A run of periods stays inside its sentence, the character after a closing
    period is dropped, and trailing text without a closing period is discarded.
    """
    sentences: list[str] = []
    current: list[str] = []
    skip = False
    for pos, ch in enumerate(data):
        if skip:
            skip = False
            continue
        current.append(ch)
        following = data[pos + 1] if pos + 1 < len(data) else ""
        if ch == "." and following != ".":
            sentences.append("".join(current))
            current = []
            skip = True
    return sentences


def remove_spaces(data: Iterable[str]) -> list[str]:
    """Remove every space from each string."""
    return [item.replace(" ", "") for item in data]


def remove_null_byte(data: Iterable[str]) -> list[str]:
    """Drop empty strings."""
    return [item for item in data if item]


def segment(text: str) -> list[str]:
    """Split text into words and punctuation marks.

    Words are separated by single spaces; each of ``, ! . -`` becomes its own
    segment and the character right after it is skipped. Repeated spaces yield
    empty segments.
    """
    segments: list[str] = []
    start = 0
    pos = 0
    last = len(text) - 1
    while pos < len(text):
        ch = text[pos]
        if ch == " ":
            segments.append(text[start:pos])
            start = pos + 1
        elif ch in _PUNCTUATION:
            segments.append(text[start:pos])
            segments.append(ch)
            start = pos + 2
            pos += 1
        elif pos == last:
            segments.append(text[start:])
        pos += 1
    return segments


def tokenize(text: str) -> list[float]:
    """Number each distinct segment by order of first appearance, from 1."""
    ids: dict[str, float] = {}
    tokens = []
    for word in segment(text):
        if word not in ids:
            ids[word] = float(len(ids) + 1)
        tokens.append(ids[word])
    return tokens


def remove_stop_words(text: Union[str, Sequence[str]]) -> list[str]:
    """Drop English stop words.

    A string is lower-cased and segmented first; a sequence of segments is
    filtered as it is.
    """
    if isinstance(text, str):
        segments = remove_spaces(segment(to_lower(text)))
    else:
        segments = list(text)
    return [word for word in segments if word not in STOP_WORDS]


def _strip_suffix(word: str) -> str:
    cut = next((i for i in range(len(word)) if word[i:] in _SUFFIX_SET), None)
    return word if cut is None else word[:cut]


def stemming(text: str) -> str:
    """Strip from each word the longest tail that is a known suffix."""
    return _WORD.sub(lambda match: _strip_suffix(match.group()), text)


def unique(items: Iterable[T]) -> list[T]:
    """Distinct items in order of first appearance."""
    return list(dict.fromkeys(items))


def create_word_list(sentences: Iterable[str]) -> list[str]:
    """Distinct non-stop-word segments across all sentences."""
    combined = " ".join(sentences)
    return remove_spaces(unique(remove_stop_words(combined)))


def _vocabulary(sentences: Sequence[str]) -> tuple[list[str], list[list[str]]]:
    words = remove_null_byte(remove_stop_words(create_word_list(sentences)))
    segmented = [remove_stop_words(sentence) for sentence in sentences]
    return words, segmented


def bag_of_words(sentences: Sequence[str], kind: str = "Default") -> np.ndarray:
    """Sentence-by-word matrix of counts, or of presence when kind is "Binary"."""
    words, segmented = _vocabulary(sentences)
    column = {word: k for k, word in enumerate(words)}
    bow = np.zeros((len(sentences), len(words)))
    for row, segments in zip(bow, segmented):
        for word in segments:
            k = column.get(word)
            if k is None:
                continue
            if kind == "Binary":
                row[k] = 1
            else:
                row[k] += 1
    return bow


def tfidf(sentences: Sequence[str]) -> np.ndarray:
    """Term frequency times inverse document frequency for each sentence and word."""
    words, segmented = _vocabulary(sentences)
    column = {word: k for k, word in enumerate(words)}
    counts = np.zeros((len(segmented), len(words)))
    for row, segments in zip(counts, segmented):
        for word in segments:
            k = column.get(word)
            if k is not None:
                row[k] += 1
    lengths = np.array([len(segments) for segments in segmented], dtype=float)
    frequency = (counts > 0).sum(axis=0).astype(float)
    with np.errstate(divide="ignore", invalid="ignore"):
        tf = counts / lengths[:, None]
        idf = np.log(len(segmented) / frequency)
        return tf * idf


def lsa(sentences: Sequence[str], dim: int) -> np.ndarray:
    """Latent semantic word embeddings: the top ``dim`` rows of S times V^T."""
    doc_word = bag_of_words(sentences, "Binary")
    _, singular, vt = np.linalg.svd(doc_word)
    if not 0 < dim <= len(singular):
        raise ValueError(f"dim must lie in 1..{len(singular)}, got {dim}")
    return singular[:dim, None] * vt[:dim]