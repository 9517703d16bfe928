"""Weekly balance report models."""

from __future__ import annotations

from dataclasses import dataclass, field

from coaching_engine.models.enums import BalanceIssueKind
from coaching_engine.models.work_type import WorkType


@dataclass(frozen=True)
class WorkTypeShare:
    """How often one work type appears across a week."""

    work_type: WorkType
    count: int  # days carrying this work type
    percentage: float  # count / 7 * 100


@dataclass(frozen=True)
class BalanceIssue:
    kind: BalanceIssueKind
    subject: str  # work type name or category label
    message: str


@dataclass(frozen=True)
class BalanceReport:
    """Output of analyze_balance(): distribution plus detected imbalances."""

    distribution: tuple[WorkTypeShare, ...] = field(default_factory=tuple)
    issues: tuple[BalanceIssue, ...] = field(default_factory=tuple)

    @property
    def warnings(self) -> tuple[str, ...]:
        """Human-readable warning messages in emission order."""
        return tuple(issue.message for issue in self.issues)

    @property
    def is_balanced(self) -> bool:
        return not self.issues

    def share_for(self, work_type_id: str) -> WorkTypeShare | None:
        for share in self.distribution:
            if share.work_type.id == work_type_id:
                return share
        return None
