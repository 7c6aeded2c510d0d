"""Strip navigation, ads and other non-content elements from a copy."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from bs4 import Tag

from webclip.dom import DocumentTree
from webclip.extractor.rules import NOISE_RULES, NoiseRule
from webclip.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class RuleOutcome:
    """Result of applying one noise rule to the working copy."""
    selector: str
    removed: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class NoiseReport:
    """Outcomes of every noise rule applied during one extraction."""
    outcomes: List[RuleOutcome] = field(default_factory=list)

    @property
    def removed_total(self) -> int:
        return sum(outcome.removed for outcome in self.outcomes)

    @property
    def failures(self) -> List[RuleOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


def apply_rule(clone: Tag, rule: NoiseRule) -> RuleOutcome:
    """Remove every descendant of ``clone`` matching ``rule``.

    Errors are recorded on the outcome instead of being raised.
    """
    outcome = RuleOutcome(selector=rule.selector)
    try:
        for element in clone.select(rule.selector):
            # Already gone with an ancestor matched earlier
            if element.decomposed:
                continue
            DocumentTree.remove(element)
            outcome.removed += 1
    except Exception as e:
        outcome.error = f"{type(e).__name__}: {e}"
        logger.warning(f"Noise rule {rule.selector!r} failed: {outcome.error}")
    return outcome


def remove_noise(
    node: Tag,
    rules: Sequence[NoiseRule] = NOISE_RULES
) -> Tuple[Tag, NoiseReport]:
    """Clone ``node`` and strip noise elements from the clone.

    Args:
        node: Candidate element from the live document; left untouched
        rules: Noise rules to apply

    Returns:
        The pruned clone and a report with one outcome per rule
    """
    clone = DocumentTree.clone(node)
    report = NoiseReport()

    for rule in rules:
        outcome = apply_rule(clone, rule)
        report.outcomes.append(outcome)
        if outcome.removed:
            logger.debug(f"Removed {outcome.removed} element(s) matching {rule.selector!r}")

    return clone, report
