"""Rule evaluator interface for the Contract Audit System."""

from abc import ABC, abstractmethod
from typing import List

from ..models.enums import AuditRule
from ..models.flag import AuditFlag


class IRuleEvaluator(ABC):
    """
    Abstract interface for audit rule evaluation.

    One implementation exists per AuditRule member. Implementations must be
    pure: the same text always yields the same, identically ordered flags.
    """

    rule: AuditRule

    @abstractmethod
    def evaluate(self, text: str) -> List[AuditFlag]:
        """
        Evaluate the rule against a document's full text.

        Args:
            text: Plain text extracted from the document.

        Returns:
            Flags ordered by increasing start offset. Empty or
            whitespace-only text yields an empty list.
        """
        pass
