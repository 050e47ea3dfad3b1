"""Effects and categories endpoints."""

import pytest

from helpers.flavor import system_log


class TestEffects:
    def test_list(self, client):
        resp = client.get("/effects")
        assert resp.status_code == 200
        data = resp.json()
        assert [e["id"] for e in data] == [1, 2, 3, 4, 5]
        assert data[0]["categoryEmoji"] == "🎬"
        assert data[0]["dateAdded"] == "2025-01-15"

    def test_filter(self, client):
        data = client.get("/effects", params={"category": "films"}).json()
        assert [e["id"] for e in data] == [1, 2, 4]

    def test_filter_unknown(self, client):
        assert client.get("/effects", params={"category": "none"}).json() == []


class TestEffectDetail:
    def test_enriched(self, client):
        resp = client.get("/effect/1")
        assert resp.status_code == 200
        data = resp.json()
        assert data["title"] == "Luke, I am your father"
        assert (data["votesA"], data["votesB"]) == (3, 7)
        assert (data["percentA"], data["percentB"], data["totalVotes"]) == (30.0, 70.0, 10)
        assert data["systemLog"] == system_log("Luke, I am your father")

    def test_no_votes_is_even(self, client):
        data = client.get("/effect/3").json()
        assert (data["percentA"], data["percentB"], data["totalVotes"]) == (50, 50, 0)

    def test_not_found(self, client):
        resp = client.get("/effect/999")
        assert resp.status_code == 404
        assert "error" in resp.json()

    @pytest.mark.parametrize("bad", ["abc", "1.5", "12abc"])
    def test_invalid_id(self, client, bad):
        resp = client.get(f"/effect/{bad}")
        assert resp.status_code == 400
        assert "error" in resp.json()


class TestLookups:
    def test_most_controversial(self, client):
        data = client.get("/effects/most-controversial").json()
        assert data["id"] == 2
        assert data["percentA"] == data["percentB"] == 50.0

    def test_random(self, client):
        assert client.get("/effects/random").json()["id"] in {1, 2, 3, 4, 5}


class TestCategories:
    def test_summaries(self, client):
        resp = client.get("/categories")
        assert resp.status_code == 200
        assert resp.json() == [
            {"category": "films", "emoji": "🎬", "name": "Films & TV", "count": 3},
            {"category": "music", "emoji": "🎵", "name": "Music", "count": 1},
            {"category": "brands", "emoji": "🏢", "name": "Brands", "count": 1},
        ]


class TestHealth:
    def test_healthz(self, client, backend):
        assert client.get("/healthz").json() == {"ok": True, "backend": backend}
