"""Word supply for the typing fight.

The combat engine only needs something with ``next_word() -> str``.
Three suppliers ship with the game:

    FallbackWords()                     # built-in list, uniform random
    TomlWordPack.from_file("data/words.toml")
    resolve_word_source(None)           # → FallbackWords

Usage:
    words = resolve_word_source(pack)   # pack may be None
    word = words.next_word()            # → "nova"
"""

from __future__ import annotations
import random
import tomllib
from pathlib import Path
from typing import Protocol, Sequence


FALLBACK_WORDS: tuple[str, ...] = (
    "nova", "blade", "strike", "ember", "frost", "quake", "spark",
    "shadow", "thunder", "viper", "rune", "storm", "fang", "comet",
    "dojo", "parry", "guard", "swift", "combo", "focus",
)


class WordSource(Protocol):
    def next_word(self) -> str: ...


def clean_word(word) -> str:
    """Normalise a supplied word; empty string if it isn't usable."""
    if not isinstance(word, str):
        return ""
    word = word.strip().lower()
    if word and word.isascii() and word.isalpha():
        return word
    return ""


class FallbackWords:
    """Uniform random sampling from a fixed list."""

    def __init__(self, words: Sequence[str] = FALLBACK_WORDS,
                 rng: random.Random | None = None):
        cleaned = [w for w in (clean_word(w) for w in words) if w]
        self.words: list[str] = cleaned or list(FALLBACK_WORDS)
        self._rng = rng or random.Random()

    def next_word(self) -> str:
        return self._rng.choice(self.words)


class TomlWordPack(FallbackWords):
    """A word list loaded from a TOML file.

    Expected layout::

        [pack]
        name = "Dojo basics"
        words = ["nova", "blade", ...]
    """

    def __init__(self, name: str, words: Sequence[str],
                 rng: random.Random | None = None):
        super().__init__(words, rng)
        self.name = name

    @classmethod
    def from_file(cls, filepath: str | Path,
                  rng: random.Random | None = None) -> "TomlWordPack":
        filepath = Path(filepath)
        if not filepath.exists():
            alt = Path(__file__).parent.parent / "data" / "words.toml"
            filepath = alt if alt.exists() else filepath
        if not filepath.exists():
            print(f"[WORDS] file not found: {filepath} — using fallback list")
            return cls("fallback", FALLBACK_WORDS, rng)

        with open(filepath, "rb") as f:
            data = tomllib.load(f)

        pack = data.get("pack", {})
        raw = pack.get("words", [])
        usable = [w for w in raw if clean_word(w)]
        if not usable:
            print(f"[WORDS] {filepath}: no usable words — using fallback list")
            return cls("fallback", FALLBACK_WORDS, rng)
        if len(usable) != len(raw):
            print(f"[WORDS] {filepath}: skipped {len(raw) - len(usable)} unusable words")
        pack_obj = cls(pack.get("name", filepath.stem), usable, rng)
        print(f"[WORDS] loaded pack '{pack_obj.name}' ({len(pack_obj.words)} words)")
        return pack_obj


def resolve_word_source(source: WordSource | None,
                        rng: random.Random | None = None) -> WordSource:
    """Return *source*, or the built-in fallback list when there is none."""
    if source is None:
        return FallbackWords(rng=rng)
    return source
