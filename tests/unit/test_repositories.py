"""Effect and submission store contract, run against both backends."""

import json
import threading
from datetime import date, datetime

import pytest

from app.errors import NotFoundError, StorageError, ValidationError
from app.models.effects import Effect, Submission
from app.repositories.effects import JsonEffectRepository


def _new_effect() -> Effect:
    return Effect(
        id=0,
        category="music",
        category_emoji="🎵",
        category_name="Music",
        title="Sex and the City",
        question="Was it Sex and the City or Sex in the City?",
        variant_a="Sex and the City",
        variant_b="Sex in the City",
        date_added=date(2025, 2, 1),
    )


class TestEffectReads:
    def test_get(self, effect_store):
        effect = effect_store.get(1)
        assert effect.title == "Luke, I am your father"
        assert (effect.votes_a, effect.votes_b) == (3, 7)
        assert effect.date_added == date(2025, 1, 15)

    def test_get_missing(self, effect_store):
        assert effect_store.get(999) is None

    def test_list_all_ordered(self, effect_store):
        assert [e.id for e in effect_store.list_all()] == [1, 2, 3, 4, 5]

    def test_list_by_category(self, effect_store):
        assert [e.id for e in effect_store.list_effects("films")] == [1, 2, 4]

    def test_list_unknown_category(self, effect_store):
        assert effect_store.list_effects("nope") == []


class TestIncrementVote:
    def test_increments_only_chosen_variant(self, effect_store):
        effect = effect_store.increment_vote(4, "A")
        assert (effect.votes_a, effect.votes_b) == (6, 2)

        effect = effect_store.increment_vote(4, "B")
        assert (effect.votes_a, effect.votes_b) == (6, 3)

    def test_persisted(self, effect_store):
        effect_store.increment_vote(3, "B")
        assert effect_store.get(3).votes_b == 1

    def test_missing(self, effect_store):
        with pytest.raises(NotFoundError):
            effect_store.increment_vote(999, "A")

    def test_bad_variant(self, effect_store):
        with pytest.raises(ValidationError):
            effect_store.increment_vote(1, "C")

    def test_two_concurrent_votes_both_counted(self, effect_store):
        barrier = threading.Barrier(2)
        errors = []

        def vote():
            try:
                barrier.wait()
                effect_store.increment_vote(4, "A")
            except Exception as e:  # surfaced below
                errors.append(e)

        threads = [threading.Thread(target=vote) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert effect_store.get(4).votes_a == 7

    def test_many_concurrent_votes(self, effect_store):
        def vote():
            for _ in range(10):
                effect_store.increment_vote(3, "A")

        threads = [threading.Thread(target=vote) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        effect = effect_store.get(3)
        assert (effect.votes_a, effect.votes_b) == (40, 0)


class TestEffectWrites:
    def test_create_assigns_next_id(self, effect_store):
        created = effect_store.create(_new_effect())
        assert created.id == 6
        assert effect_store.get(6).title == "Sex and the City"
        assert effect_store.get(6).votes_a == 0

    def test_delete(self, effect_store):
        assert effect_store.delete(2) is True
        assert effect_store.get(2) is None
        assert effect_store.delete(2) is False


class TestSubmissions:
    def _submission(self, title="Fruit of the Loom logo"):
        return Submission(
            id=0,
            category="brands",
            category_emoji="🏢",
            category_name="Brands",
            title=title,
            question="Did the logo ever have a cornucopia?",
            variant_a="With cornucopia",
            variant_b="Without cornucopia",
            date_submitted=datetime(2025, 3, 1, 12, 0),
        )

    def test_add_and_list(self, submission_store):
        first = submission_store.add(self._submission())
        second = submission_store.add(self._submission("Monopoly man monocle"))

        assert second.id > first.id
        pending = submission_store.list_pending()
        assert [s.id for s in pending] == [first.id, second.id]
        assert pending[0].status == "pending"
        assert submission_store.get(first.id).title == "Fruit of the Loom logo"

    def test_remove(self, submission_store):
        stored = submission_store.add(self._submission())
        assert submission_store.remove(stored.id) is True
        assert submission_store.get(stored.id) is None
        assert submission_store.remove(stored.id) is False


class TestJsonFile:
    def test_written_file_is_plain_json(self, data_dir):
        store = JsonEffectRepository(data_dir)
        store.increment_vote(1, "A")

        records = json.loads((data_dir / "effects.json").read_text(encoding="utf-8"))
        assert records[0]["votesA"] == 4
        assert records[0]["categoryEmoji"] == "🎬"
        assert "\n" not in (data_dir / "effects.json").read_text(encoding="utf-8")

    def test_missing_file_is_empty(self, tmp_path):
        assert JsonEffectRepository(tmp_path).list_all() == []

    def test_corrupt_file(self, tmp_path):
        (tmp_path / "effects.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError):
            JsonEffectRepository(tmp_path).list_all()

    @pytest.mark.parametrize("content", ["[1, 2, 3]", '[{"id": 1}, null]', '{"id": 1}'])
    def test_records_must_be_objects(self, tmp_path, content):
        (tmp_path / "effects.json").write_text(content, encoding="utf-8")
        repo = JsonEffectRepository(tmp_path)
        with pytest.raises(StorageError):
            repo.list_all()
        with pytest.raises(StorageError):
            repo.get(1)
        with pytest.raises(StorageError):
            repo.increment_vote(1, "A")

    def test_incomplete_record(self, tmp_path):
        (tmp_path / "effects.json").write_text('[{"id": 1}]', encoding="utf-8")
        with pytest.raises(StorageError, match="Malformed effect record"):
            JsonEffectRepository(tmp_path).list_all()
