"""Effect domain entities - stored records and derived aggregates."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from app.models.common import BaseEntity, RecordEntity
from helpers import formulas


def _to_date(value: Any) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _to_datetime(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


@dataclass
class Effect(RecordEntity):
    """A catalog claim with two competing variants."""

    id: int
    category: str
    category_emoji: str
    category_name: str
    title: str
    question: str
    variant_a: str
    variant_b: str
    votes_a: int = 0
    votes_b: int = 0
    current_state: str = ""
    source_link: str = ""
    date_added: date | None = None

    def __post_init__(self):
        self.id = int(self.id)
        self.votes_a = int(self.votes_a or 0)
        self.votes_b = int(self.votes_b or 0)
        self.current_state = self.current_state or ""
        self.source_link = self.source_link or ""
        self.date_added = _to_date(self.date_added)

    @property
    def total_votes(self) -> int:
        return self.votes_a + self.votes_b

    def aggregate(self) -> "VoteAggregate":
        return VoteAggregate.from_counts(self.votes_a, self.votes_b)


@dataclass
class Submission(RecordEntity):
    """User-proposed effect awaiting moderation."""

    id: int
    category: str
    category_emoji: str
    category_name: str
    title: str
    question: str
    variant_a: str
    variant_b: str
    current_state: str = ""
    source_link: str = ""
    submitter_email: str = ""
    status: str = "pending"
    date_submitted: datetime | None = field(default=None)

    def __post_init__(self):
        self.id = int(self.id)
        self.current_state = self.current_state or ""
        self.source_link = self.source_link or ""
        self.submitter_email = self.submitter_email or ""
        self.date_submitted = _to_datetime(self.date_submitted)


@dataclass
class VoteAggregate(BaseEntity):
    """Vote totals and percentages for one effect."""

    votes_for: int
    votes_against: int
    percent_for: float
    percent_against: float
    total: int

    @classmethod
    def from_counts(cls, votes_for: int, votes_against: int) -> "VoteAggregate":
        percent_for, percent_against = formulas.vote_percentages(votes_for, votes_against)
        return cls(
            votes_for=votes_for,
            votes_against=votes_against,
            percent_for=percent_for,
            percent_against=percent_against,
            total=votes_for + votes_against,
        )


@dataclass
class CategorySummary(BaseEntity):
    """Effect count for one category."""

    category: str
    emoji: str
    name: str
    count: int


@dataclass
class SiteStats(BaseEntity):
    """Site-wide totals."""

    total_effects: int
    total_votes: int
    estimated_participants: int
