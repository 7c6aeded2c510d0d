"""Content extraction: candidate selection, noise removal and normalization."""

from webclip.exceptions import ExtractionError, InvalidInput

from .candidate import select_candidate
from .extractor import ContentExtractor, ExtractionResult, extract_content
from .noise import NoiseReport, RuleOutcome, remove_noise
from .normalize import normalize_text
from .rules import (
    CANDIDATE_RULES,
    MIN_CANDIDATE_LENGTH,
    NOISE_RULES,
    CandidateRule,
    NoiseRule,
)

__all__ = [
    "ContentExtractor",
    "ExtractionResult",
    "extract_content",
    "select_candidate",
    "remove_noise",
    "normalize_text",
    "NoiseReport",
    "RuleOutcome",
    "CandidateRule",
    "NoiseRule",
    "CANDIDATE_RULES",
    "NOISE_RULES",
    "MIN_CANDIDATE_LENGTH",
    "ExtractionError",
    "InvalidInput",
]
