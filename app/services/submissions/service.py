"""Submission service - user proposals and moderation."""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from urllib.parse import urlparse

from loguru import logger

from app.errors import NotFoundError, ValidationError
from app.models.effects import Effect, Submission
from app.repositories.effects import EffectStore
from app.repositories.submissions import SubmissionStore


@dataclass(frozen=True)
class CategoryInfo:
    emoji: str
    name: str


CATEGORIES = {
    "films": CategoryInfo("🎬", "Films & TV"),
    "music": CategoryInfo("🎵", "Music"),
    "brands": CategoryInfo("🏢", "Brands"),
    "people": CategoryInfo("👤", "People"),
    "popculture": CategoryInfo("🎨", "Pop culture"),
    "geography": CategoryInfo("🗺️", "Geography"),
    "childhood": CategoryInfo("🧸", "Childhood"),
    "russian": CategoryInfo("🇷🇺", "Russian culture"),
}
UNKNOWN_CATEGORY = CategoryInfo("🧠", "Misc")

MIN_TITLE = 5
MIN_QUESTION = 20
MIN_VARIANT = 3

ACTIONS = ("approve", "reject")

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def category_info(category: str) -> CategoryInfo:
    return CATEGORIES.get(category, UNKNOWN_CATEGORY)


def is_valid_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email))


def validate_submission(
    category: str,
    title: str,
    question: str,
    variant_a: str,
    variant_b: str,
    source_link: str = "",
    email: str = "",
) -> None:
    """Raise ValidationError describing the first problem found."""
    if not all(v and v.strip() for v in (category, title, question, variant_a, variant_b)):
        raise ValidationError("Fill in all required fields")
    if category not in CATEGORIES:
        raise ValidationError(f"Unknown category: {category}")
    if len(title.strip()) < MIN_TITLE:
        raise ValidationError(f"Title must be at least {MIN_TITLE} characters")
    if len(question.strip()) < MIN_QUESTION:
        raise ValidationError(f"Question must be at least {MIN_QUESTION} characters")
    if len(variant_a.strip()) < MIN_VARIANT:
        raise ValidationError(f"Variant A must be at least {MIN_VARIANT} characters")
    if len(variant_b.strip()) < MIN_VARIANT:
        raise ValidationError(f"Variant B must be at least {MIN_VARIANT} characters")
    if variant_a.strip() == variant_b.strip():
        raise ValidationError("Variants must differ")
    if source_link and not is_valid_url(source_link.strip()):
        raise ValidationError("Invalid source URL")
    if email and not is_valid_email(email.strip()):
        raise ValidationError("Invalid email address")


class SubmissionService:
    """Queues user submissions and moves approved ones into the catalog."""

    def __init__(self, submissions: SubmissionStore, effects: EffectStore):
        self._submissions = submissions
        self._effects = effects
        logger.debug("SubmissionService initialized")

    def submit(
        self,
        category: str,
        title: str,
        question: str,
        variant_a: str,
        variant_b: str,
        current_state: str = "",
        source_link: str = "",
        email: str = "",
    ) -> Submission:
        """Validate and queue a new submission."""
        current_state, source_link, email = current_state or "", source_link or "", email or ""
        validate_submission(category, title, question, variant_a, variant_b, source_link, email)

        info = category_info(category)
        submission = Submission(
            id=0,
            category=category,
            category_emoji=info.emoji,
            category_name=info.name,
            title=title.strip(),
            question=question.strip(),
            variant_a=variant_a.strip(),
            variant_b=variant_b.strip(),
            current_state=current_state.strip(),
            source_link=source_link.strip(),
            submitter_email=email.strip(),
            status="pending",
            date_submitted=datetime.now(timezone.utc).replace(tzinfo=None),
        )
        return self._submissions.add(submission)

    def pending(self) -> list[Submission]:
        return self._submissions.list_pending()

    def moderate(self, submission_id: int, action: str) -> Effect | None:
        """Approve (publish as a new effect) or reject a submission.

        Either way the submission leaves the queue. Returns the published
        effect on approval.
        """
        if action not in ACTIONS:
            raise ValidationError(f"Invalid action: {action!r}. Must be 'approve' or 'reject'")

        submission = self._submissions.get(submission_id)
        if submission is None:
            raise NotFoundError(f"Submission {submission_id} not found")

        effect = None
        if action == "approve":
            effect = self._effects.create(
                Effect(
                    id=0,
                    category=submission.category,
                    category_emoji=submission.category_emoji,
                    category_name=submission.category_name,
                    title=submission.title,
                    question=submission.question,
                    variant_a=submission.variant_a,
                    variant_b=submission.variant_b,
                    votes_a=0,
                    votes_b=0,
                    current_state=submission.current_state,
                    source_link=submission.source_link,
                    date_added=date.today(),
                )
            )

        self._submissions.remove(submission_id)
        logger.info("Submission {} {}d", submission_id, action)
        return effect
