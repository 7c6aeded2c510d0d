"""Selector tables driving candidate selection and noise removal."""

from dataclasses import dataclass
from typing import Tuple

# Rendered characters a candidate must exceed to be chosen
MIN_CANDIDATE_LENGTH = 200


@dataclass(frozen=True)
class CandidateRule:
    """A region that may hold the page's main content."""
    selector: str
    min_length: int = MIN_CANDIDATE_LENGTH


@dataclass(frozen=True)
class NoiseRule:
    """Elements stripped from the working copy before reading its text."""
    selector: str
    category: str


# Highest priority first
CANDIDATE_RULES: Tuple[CandidateRule, ...] = (
    CandidateRule("article"),
    CandidateRule('[role="main"]'),
    CandidateRule("main"),
    CandidateRule(".post-content"),
    CandidateRule("#content"),
    CandidateRule("#main"),
)

NOISE_RULES: Tuple[NoiseRule, ...] = (
    NoiseRule("script", "structural"),
    NoiseRule("style", "structural"),
    NoiseRule("noscript", "structural"),
    NoiseRule("iframe", "structural"),
    NoiseRule("svg", "structural"),
    NoiseRule("nav", "semantic"),
    NoiseRule("footer", "semantic"),
    NoiseRule("header", "semantic"),
    NoiseRule("aside", "semantic"),
    NoiseRule('[role="navigation"]', "aria"),
    NoiseRule('[role="banner"]', "aria"),
    NoiseRule('[role="contentinfo"]', "aria"),
    NoiseRule(".ads", "convention"),
    NoiseRule(".cookie", "convention"),
    NoiseRule(".popup", "convention"),
    NoiseRule("#sidebar", "convention"),
    NoiseRule(".share-buttons", "convention"),
    NoiseRule(".comments", "convention"),
)
