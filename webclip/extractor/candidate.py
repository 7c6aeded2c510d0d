"""Pick the region of a page most likely to hold its readable content."""

from typing import Optional, Sequence, Tuple

from bs4 import Tag

from webclip.dom import DocumentTree
from webclip.extractor.rules import CANDIDATE_RULES, CandidateRule
from webclip.utils.logger import get_logger

logger = get_logger(__name__)


def select_candidate(
    document: DocumentTree,
    rules: Sequence[CandidateRule] = CANDIDATE_RULES
) -> Tuple[Tag, Optional[CandidateRule]]:
    """Return the first rule match with enough rendered text.

    Only the first element matching each selector is measured. When no
    rule qualifies the document body is returned together with ``None``.
    """
    for rule in rules:
        element = document.query_first(rule.selector)
        if element is None:
            logger.debug(f"Candidate {rule.selector!r}: no match")
            continue

        length = document.rendered_length(element)
        if length > rule.min_length:
            logger.debug(f"Candidate {rule.selector!r}: selected ({length} chars)")
            return element, rule

        logger.debug(f"Candidate {rule.selector!r}: too short ({length} chars)")

    logger.debug("No candidate qualified, falling back to body")
    return document.body, None
