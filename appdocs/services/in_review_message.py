"""Review reason classification for in-review documents.

The message shown on an in-review document is a fixed prefix followed by
the suffix of the first rule whose keyword appears in the review reason.
Keywords match case-sensitively in their lower-case or capitalized form.
Rules are evaluated in order and the last rule always matches.
"""

from collections.abc import Callable
from dataclasses import dataclass

IN_REVIEW_MESSAGE_PREFIX = "Your application has been placed in review"

ADDRESS_VERIFICATION_SUFFIX = (
    " pending outstanding address verification for FICA purposes."
)
BANK_VERIFICATION_SUFFIX = " pending outstanding bank account verification."
SUSPICIOUS_BEHAVIOUR_SUFFIX = (
    " because of suspicious account behaviour. Please contact support ASAP."
)


@dataclass(frozen=True)
class ReviewReasonRule:
    """A (predicate, suffix) pair.

    Attributes:
        matches: Predicate over the review reason.
        suffix: Text appended to the prefix when the predicate holds.
    """

    matches: Callable[[str], bool]
    suffix: str


def contains_keyword(keyword: str) -> Callable[[str], bool]:
    """Predicate matching keyword as written or capitalized.

    "bank" matches "bank" and "Bank" (sentence start) but not "BANK".
    """
    forms = (keyword, keyword.capitalize())
    return lambda reason: any(form in reason for form in forms)


REVIEW_REASON_RULES: tuple[ReviewReasonRule, ...] = (
    ReviewReasonRule(contains_keyword("address"), ADDRESS_VERIFICATION_SUFFIX),
    ReviewReasonRule(contains_keyword("bank"), BANK_VERIFICATION_SUFFIX),
    ReviewReasonRule(lambda _reason: True, SUSPICIOUS_BEHAVIOUR_SUFFIX),
)


def build_in_review_message(
    reason: str,
    rules: tuple[ReviewReasonRule, ...] = REVIEW_REASON_RULES,
) -> str:
    """Build the in-review message for a review reason.

    Args:
        reason: The review's reason text.
        rules: Ordered rules; the final rule must be a catch-all.

    Returns:
        The prefix concatenated directly with the first matching suffix.

    Raises:
        ValueError: If no rule matches (rules without a catch-all).
    """
    for rule in rules:
        if rule.matches(reason):
            return IN_REVIEW_MESSAGE_PREFIX + rule.suffix
    raise ValueError(f"No review reason rule matched: {reason!r}")
