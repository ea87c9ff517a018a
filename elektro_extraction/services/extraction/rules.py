"""Ordered regex rule families with first-match-wins evaluation.

A pattern library is a set of ``RuleFamily`` objects, one per output field.
Each family is an ordered tuple of ``ExtractionRule`` entries: a compiled
pattern plus a named converter that turns the ``re.Match`` into a value.
The first rule whose pattern matches *and* whose converter returns a value
wins; later rules of the family are never consulted.

Compiled ``re.Pattern`` objects carry no scan position, so families can be
built once at import time and shared between calls and threads.
"""
import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from elektro_extraction.errors import RuleDefinitionError

T = TypeVar("T")

Converter = Callable[[re.Match], Optional[T]]


def coerce_text(value: Any) -> str:
    """Return ``value`` if it is a string, otherwise an empty string."""
    return value if isinstance(value, str) else ""


def join_text(*parts: Any) -> str:
    """Join text fragments with single spaces, ignoring non-strings."""
    return " ".join(coerce_text(part) for part in parts).strip()


def to_float(raw: Optional[str]) -> Optional[float]:
    """Parse a decimal number that may use a comma as separator."""
    if raw is None:
        return None
    try:
        return float(raw.replace(',', '.'))
    except ValueError:
        return None


def to_int(raw: Optional[str]) -> Optional[int]:
    """Parse an integer capture."""
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def group_int(index: int = 1) -> Converter[int]:
    """Converter returning capture group ``index`` as an integer."""
    def convert(match: re.Match) -> Optional[int]:
        return to_int(match.group(index))
    return convert


def group_float(index: int = 1) -> Converter[float]:
    """Converter returning capture group ``index`` as a float."""
    def convert(match: re.Match) -> Optional[float]:
        return to_float(match.group(index))
    return convert


def compile_pattern(pattern: str, flags: int = re.IGNORECASE) -> re.Pattern:
    """Compile a library pattern.

    Raises:
        RuleDefinitionError: If the pattern is not a valid regular expression
    """
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise RuleDefinitionError(f"Invalid pattern {pattern!r}: {e}") from e


@dataclass(frozen=True)
class RuleMatch(Generic[T]):
    """Value produced by a rule family, with the name of the winning rule."""
    value: T
    rule: str


@dataclass(frozen=True)
class ExtractionRule(Generic[T]):
    """A compiled pattern and the converter for its capture groups."""
    name: str
    pattern: re.Pattern
    convert: Converter[T]

    def apply(self, text: str) -> Optional[T]:
        """Return the converted value of the first match in ``text``."""
        match = self.pattern.search(text)
        if match is None:
            return None
        return self.convert(match)


def rule(
    name: str,
    pattern: str,
    convert: Converter[T],
    flags: int = re.IGNORECASE,
) -> ExtractionRule[T]:
    """Build an ``ExtractionRule`` from a pattern string."""
    return ExtractionRule(name=name, pattern=compile_pattern(pattern, flags), convert=convert)


@dataclass(frozen=True)
class RuleFamily(Generic[T]):
    """Ordered rules competing for one output field."""
    field: str
    rules: Tuple[ExtractionRule[T], ...]

    def first_match(self, text: str) -> Optional[RuleMatch[T]]:
        """Evaluate rules in declared order; the first value wins."""
        for candidate in self.rules:
            value = candidate.apply(text)
            if value is not None:
                return RuleMatch(value=value, rule=candidate.name)
        return None
