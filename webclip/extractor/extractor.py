"""Main-content extraction for a parsed web page."""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from bs4 import BeautifulSoup

from webclip.dom import DocumentTree
from webclip.exceptions import InvalidInput
from webclip.extractor.candidate import select_candidate
from webclip.extractor.noise import NoiseReport, remove_noise
from webclip.extractor.normalize import normalize_text
from webclip.extractor.rules import (
    CANDIDATE_RULES,
    NOISE_RULES,
    CandidateRule,
    NoiseRule,
)
from webclip.utils.logger import get_logger

logger = get_logger(__name__)

Document = Union[DocumentTree, BeautifulSoup]


@dataclass
class ExtractionResult:
    """Extracted text together with how it was obtained."""
    text: str
    rule: Optional[CandidateRule]
    report: NoiseReport

    @property
    def used_fallback(self) -> bool:
        return self.rule is None


class ContentExtractor:
    """Extracts the readable text of a page without modifying it."""

    def __init__(
        self,
        candidate_rules: Sequence[CandidateRule] = CANDIDATE_RULES,
        noise_rules: Sequence[NoiseRule] = NOISE_RULES
    ):
        self.candidate_rules = tuple(candidate_rules)
        self.noise_rules = tuple(noise_rules)

    @staticmethod
    def _as_tree(document: Document) -> DocumentTree:
        if isinstance(document, DocumentTree):
            if document.root.decomposed:
                raise InvalidInput("Document tree has been decomposed")
            return document
        if isinstance(document, BeautifulSoup):
            return DocumentTree(document)
        raise InvalidInput(
            f"Expected a DocumentTree or BeautifulSoup document, got {type(document).__name__}"
        )

    def run(self, document: Document) -> ExtractionResult:
        """Run selection, noise removal and normalization.

        Args:
            document: Parsed page; never modified

        Returns:
            ExtractionResult with the text, the winning rule and the noise report

        Raises:
            InvalidInput: If ``document`` is not a usable tree
        """
        tree = self._as_tree(document)

        candidate, rule = select_candidate(tree, self.candidate_rules)
        clone, report = remove_noise(candidate, self.noise_rules)
        text = normalize_text(tree.rendered_text(clone))

        source = rule.selector if rule is not None else "body (fallback)"
        logger.info(f"Extracted {len(text)} characters from {source}, "
                    f"removed {report.removed_total} noise elements")
        if not report.ok:
            logger.warning(f"{len(report.failures)} noise rule(s) failed during extraction")

        return ExtractionResult(text=text, rule=rule, report=report)

    def extract(self, document: Document) -> str:
        """Return only the extracted text for ``document``."""
        return self.run(document).text


def extract_content(document: Document) -> str:
    """Extract the main readable text of ``document`` with the default rules."""
    return ContentExtractor().extract(document)
