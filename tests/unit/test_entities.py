"""Tests for effect entities."""

from datetime import date

from app.models.effects import Effect, VoteAggregate


class TestEffectRecord:
    def test_from_record(self, sample_effects):
        effect = Effect.from_record(sample_effects[0])
        assert effect.category_emoji == "🎬"
        assert effect.variant_a == "Luke, I am your father (A)"
        assert effect.date_added == date(2025, 1, 15)

    def test_to_record_keys(self, sample_effects):
        record = Effect.from_record(sample_effects[0]).to_record()
        assert record == sample_effects[0]

    def test_missing_optional_fields(self):
        effect = Effect.from_record(
            {
                "id": 7,
                "category": "films",
                "categoryEmoji": "🎬",
                "categoryName": "Films & TV",
                "title": "Shazaam",
                "question": "Was there a genie movie?",
                "variantA": "Shazaam",
                "variantB": "Kazaam",
            }
        )
        assert (effect.votes_a, effect.votes_b) == (0, 0)
        assert effect.source_link == ""
        assert effect.date_added is None


class TestVoteAggregate:
    def test_from_counts(self):
        agg = VoteAggregate.from_counts(3, 7)
        assert agg.to_dict() == {
            "votes_for": 3,
            "votes_against": 7,
            "percent_for": 30.0,
            "percent_against": 70.0,
            "total": 10,
        }

    def test_empty(self):
        agg = VoteAggregate.from_counts(0, 0)
        assert (agg.percent_for, agg.percent_against, agg.total) == (50, 50, 0)
