"""Load labelled messages from a CSV file as bag-of-words vectors."""

from __future__ import annotations

import itertools
import os
import re
import string
from dataclasses import dataclass, field

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")
_NORMALIZE = str.maketrans(
    string.ascii_uppercase, string.ascii_lowercase, string.punctuation
)


@dataclass
class TextExample:
    """One message as word counts over the vocabulary, with its label."""

    vectorized_text: list[float] = field(default_factory=list)
    label: int = 0


def _split_row(line: str) -> tuple[str, str]:
    label, _, message = line.partition(",")
    return label, message


class TextLoader:
    """Reads ``label,message`` rows after a header line.

    The vocabulary holds every distinct token of the file, indexed in order of
    first appearance; each message becomes a vector of token counts.
    """

    def __init__(self, filename: str | os.PathLike[str] = "") -> None:
        self.filename = filename
        self._dataset: list[TextExample] = []
        self._vocabulary: dict[str, int] = {}
        self._vocabulary_list: list[str] = []

    @property
    def dataset(self) -> list[TextExample]:
        return list(self._dataset)

    @property
    def vocabulary_size(self) -> int:
        return len(self._vocabulary)

    @property
    def vocabulary_list(self) -> list[str]:
        return list(self._vocabulary_list)

    def _read_rows(self) -> list[tuple[str, str]]:
        with open(self.filename, encoding="utf-8") as handle:
            lines = (line.rstrip("\n") for line in handle)
            next(lines, None)  # header
            return [_split_row(line) for line in lines]

    def _build_vocabulary(self, rows: list[tuple[str, str]]) -> None:
        words = dict.fromkeys(
            itertools.chain.from_iterable(self.tokenize(message) for _, message in rows)
        )
        self._vocabulary_list = list(words)
        self._vocabulary = {word: index for index, word in enumerate(self._vocabulary_list)}

    def load_data(self) -> None:
        """Read the file, build the vocabulary and vectorize every message.

        Raises ``OSError`` (such as ``FileNotFoundError``) when the file
        cannot be opened.
        """
        rows = self._read_rows()
        self._build_vocabulary(rows)
        self._dataset = [
            TextExample(vectorized_text=self.vectorize(message), label=self.get_label(label))
            for label, message in rows
        ]

    @staticmethod
    def tokenize(text: str) -> list[str]:
        """Split on whitespace, drop ASCII punctuation and lowercase ASCII letters.

        A word made only of punctuation yields an empty token.
        """
        return [word.translate(_NORMALIZE) for word in _WHITESPACE.split(text) if word]

    def vectorize(self, text: str) -> list[float]:
        """Count how often each vocabulary word occurs in ``text``."""
        counts = [0.0] * len(self._vocabulary)
        for word in self.tokenize(text):
            index = self._vocabulary.get(word)
            if index is not None:
                counts[index] += 1.0
        return counts

    @staticmethod
    def get_label(label_text: str) -> int:
        """Return 1 for ``"spam"`` and 0 for anything else."""
        return int(label_text == "spam")