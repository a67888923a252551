"""Splitting text into paragraphs, sentences and words, with 1-based lookups.

Paragraphs are separated by newlines, sentences end with a full stop and
words are separated by single spaces.  Text after the last full stop of a
paragraph is not part of any sentence.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO


def _pick(items: Sequence, k: int, what: str):
    if not 1 <= k <= len(items):
        raise IndexError(f"{what} {k} out of range 1..{len(items)}")
    return items[k - 1]


@dataclass(frozen=True)
class Sentence:
    """A sentence as its words, without the closing full stop."""

    words: tuple[str, ...]

    def __str__(self) -> str:
        return " ".join(self.words)


@dataclass(frozen=True)
class Paragraph:
    """A paragraph as its sentences."""

    sentences: tuple[Sentence, ...]

    def __str__(self) -> str:
        return "".join(f"{sentence}." for sentence in self.sentences)


@dataclass(frozen=True)
class Document:
    """A document as its paragraphs."""

    paragraphs: tuple[Paragraph, ...]

    def __str__(self) -> str:
        return "\n".join(str(paragraph) for paragraph in self.paragraphs)

    def paragraph(self, k: int) -> Paragraph:
        """Return the ``k``-th paragraph."""
        return _pick(self.paragraphs, k, "paragraph")

    def sentence(self, k: int, m: int) -> Sentence:
        """Return the ``k``-th sentence of the ``m``-th paragraph."""
        return _pick(self.paragraph(m).sentences, k, "sentence")

    def word(self, k: int, m: int, n: int) -> str:
        """Return the ``k``-th word of sentence ``m`` in paragraph ``n``."""
        return _pick(self.sentence(m, n).words, k, "word")


def _parse_paragraph(text: str) -> Paragraph:
    pieces = text.split(".")[:-1]
    return Paragraph(tuple(Sentence(tuple(piece.split(" "))) for piece in pieces))


def parse_document(text: str) -> Document:
    """Split ``text`` into a :class:`Document`."""
    return Document(tuple(_parse_paragraph(part) for part in text.split("\n")))


def _tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _run(stream: TextIO) -> list[str]:
    count = int(stream.readline())
    paragraphs = [stream.readline().rstrip("\n") for _ in range(count)]
    document = parse_document("\n".join(paragraphs))

    tokens = _tokens(stream)
    output: list[str] = []
    for _ in range(next(tokens)):
        kind = next(tokens)
        if kind == 3:
            k, m, n = next(tokens), next(tokens), next(tokens)
            output.append(document.word(k, m, n))
        elif kind == 2:
            k, m = next(tokens), next(tokens)
            output.append(str(document.sentence(k, m)))
        else:
            output.append(str(document.paragraph(next(tokens))))
    return output


def main(argv: Sequence[str] | None = None) -> int:
    """Read a document and queries from a file argument or standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        with open(args[0], encoding="utf-8") as handle:
            lines = _run(handle)
    else:
        lines = _run(sys.stdin)
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())