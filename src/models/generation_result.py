"""Result models for bulk product generation."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class InsertOutcome:
    """Outcome of a single row inside a generation batch."""

    sku: str
    product_id: Optional[int]  # None when the row was skipped
    skipped: bool


@dataclass(frozen=True)
class GenerationResult:
    """Summary of a committed generation batch."""

    requested: int
    outcomes: List[InsertOutcome] = field(default_factory=list)

    @property
    def inserted_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.skipped)

    @property
    def skipped_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.skipped)

    def describe(self) -> str:
        """Human-readable summary used in API responses."""
        message = f"Added {self.inserted_count} products successfully"
        if self.skipped_count:
            message += f", skipped {self.skipped_count} duplicate SKUs"
        return message
