"""Domain models (Pydantic v2).

These models describe *what* a generation run asks for and *what* the range
parser found, not how the characters are drawn. Validation happens here, at
the edge, so the builder and sampler can trust their inputs.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.charsets import CANONICAL_ORDER, CharacterClass


class GenerationRequest(BaseModel):
    """Configuration for a single run of the generator.

    Built once from CLI input and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(
        default=12,
        ge=1,
        description="Number of characters per password.",
    )
    count: int = Field(
        default=1,
        ge=1,
        description="Number of passwords to produce.",
    )
    lower: bool = Field(default=False, description="Include lowercase letters.")
    upper: bool = Field(default=False, description="Include uppercase letters.")
    digits: bool = Field(default=False, description="Include digits.")
    symbols: bool = Field(default=False, description="Include symbols.")
    all_classes: bool = Field(
        default=False,
        description="Use every built-in class; individual class flags are ignored.",
    )
    custom_range: str | None = Field(
        default=None,
        description="Custom range specification, e.g. 'A-F,0-5'.",
    )
    exclude_similar: bool = Field(
        default=False,
        description="Strip visually similar characters (0 O 1 l I 5 S).",
    )
    dedupe: bool = Field(
        default=False,
        description="Keep only the first occurrence of each character in the alphabet.",
    )

    def selected_classes(self) -> tuple[CharacterClass, ...]:
        """Selected built-in classes in canonical order."""

        if self.all_classes:
            return CANONICAL_ORDER
        flags = {
            CharacterClass.LOWER: self.lower,
            CharacterClass.UPPER: self.upper,
            CharacterClass.DIGITS: self.digits,
            CharacterClass.SYMBOLS: self.symbols,
        }
        return tuple(c for c in CANONICAL_ORDER if flags[c])

    @property
    def has_source(self) -> bool:
        return bool(self.selected_classes() or self.custom_range)


class RangeIssueKind(str, Enum):
    MULTIPLE_DASHES = "multiple_dashes"
    MISSING_BOUND = "missing_bound"
    REVERSED = "reversed"


class RangeIssue(BaseModel):
    """Diagnostic for one part of a custom range that contributed nothing."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Position of the part in the spec (0-based).")
    part: str = Field(..., description="Trimmed text of the offending part.")
    kind: RangeIssueKind
    message: str = Field(..., min_length=1)


class RangeParseResult(BaseModel):
    """Characters produced by a range spec plus per-part diagnostics."""

    chars: str = ""
    issues: list[RangeIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues
