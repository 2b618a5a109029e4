from __future__ import annotations
from pathlib import Path
from typing import List

from oneaway.engine import OneAwayGuess


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def split_entries(line: str) -> List[str]:
    """Comma-separated entries, stripped, with inner whitespace collapsed."""
    return [" ".join(part.split()) for part in line.split(",") if part.strip()]


def read_words(p: Path | str) -> List[str]:
    """
    Read a puzzle roster. Accepts one word per line or a group file
    (comma-separated words per line); blank lines are dropped.
    """
    out: List[str] = []
    for ln in read_lines(p):
        out.extend(split_entries(ln))
    return out


def read_groups(p: Path | str) -> List[List[str]]:
    """
    Read a solved partition: one group per line, 4 comma-separated words.
    Raises ValueError if any non-blank line doesn't hold exactly 4 words.
    """
    groups: List[List[str]] = []
    for i, ln in enumerate(read_lines(p), start=1):
        if not ln.strip():
            continue
        words = split_entries(ln)
        if len(words) != 4:
            raise ValueError(f"{p}:{i}: expected 4 comma-separated words, got {len(words)}")
        groups.append(words)
    return groups


def read_guesses(p: Path | str) -> List[OneAwayGuess]:
    """
    Read a guess log: one guess per line, 4 comma-separated words.
    Guess ids are g1, g2, ... in line order (blank lines skipped).
    """
    guesses: List[OneAwayGuess] = []
    for i, ln in enumerate(read_lines(p), start=1):
        if not ln.strip():
            continue
        try:
            guesses.append(OneAwayGuess(id=f"g{len(guesses) + 1}", words=tuple(split_entries(ln))))
        except ValueError as e:
            raise ValueError(f"{p}:{i}: {e}") from e
    return guesses
