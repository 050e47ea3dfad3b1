"""Shared fixtures: sample catalog on both storage backends."""

import base64
import copy
import hashlib
import hmac
import json

import pytest
from fastapi.testclient import TestClient

from app.container import container
from app.repositories.db import close_db, get_write_connection
from app.repositories.effects import EffectRepository, JsonEffectRepository
from app.repositories.submissions import JsonSubmissionRepository, SubmissionRepository
from etl import import_effects
from web.api.app import create_app

ADMIN_PASSWORD = "open-sesame"
SESSION_SECRET = "test-session-secret-0123456789abcdef"


def _effect(id, category, emoji, name, title, votes_a, votes_b):
    return {
        "id": id,
        "category": category,
        "categoryEmoji": emoji,
        "categoryName": name,
        "title": title,
        "question": f"How do you remember {title}?",
        "variantA": f"{title} (A)",
        "variantB": f"{title} (B)",
        "votesA": votes_a,
        "votesB": votes_b,
        "currentState": "",
        "sourceLink": "",
        "dateAdded": "2025-01-15",
    }


SAMPLE_EFFECTS = [
    _effect(1, "films", "🎬", "Films & TV", "Luke, I am your father", 3, 7),
    _effect(2, "films", "🎬", "Films & TV", "Mirror mirror", 1, 1),
    _effect(3, "music", "🎵", "Music", "We are the champions", 0, 0),
    _effect(4, "films", "🎬", "Films & TV", "Forrest Gump box", 5, 2),
    _effect(5, "brands", "🏢", "Brands", "Berenstain Bears", 10, 10),
]


@pytest.fixture
def sample_effects() -> list[dict]:
    return copy.deepcopy(SAMPLE_EFFECTS)


@pytest.fixture
def data_dir(tmp_path, sample_effects):
    """Directory holding a seeded effects.json."""
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "effects.json").write_text(json.dumps(sample_effects, ensure_ascii=False), encoding="utf-8")
    return directory


@pytest.fixture
def db_path(tmp_path, data_dir):
    """DuckDB file seeded from the same sample catalog."""
    path = str(tmp_path / "mandela.duckdb")
    conn = get_write_connection(path)
    import_effects(conn, data_dir / "effects.json")
    conn.close()
    yield path
    close_db(path)


@pytest.fixture(params=["duckdb", "json"])
def backend(request) -> str:
    return request.param


@pytest.fixture
def effect_store(backend, db_path, data_dir):
    if backend == "duckdb":
        return EffectRepository(db_path)
    return JsonEffectRepository(data_dir)


@pytest.fixture
def submission_store(backend, db_path, data_dir):
    if backend == "duckdb":
        return SubmissionRepository(db_path)
    return JsonSubmissionRepository(data_dir)


@pytest.fixture
def client(backend, db_path, data_dir):
    """API client wired to a freshly seeded backend."""
    container.init(
        backend=backend,
        db_path=db_path,
        data_dir=data_dir,
        admin_password=ADMIN_PASSWORD,
        session_secret=SESSION_SECRET,
        force=True,
    )
    yield TestClient(create_app())
    container.reset()


@pytest.fixture
def admin_headers(client) -> dict:
    resp = client.post("/admin/login", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def sign_token():
    """HMAC-SHA256 token builder with an arbitrary secret and payload."""

    def sign(secret: bytes, payload: dict) -> str:
        def enc(data: dict) -> str:
            return base64.urlsafe_b64encode(json.dumps(data).encode()).rstrip(b"=").decode()

        signing_input = f"{enc({'typ': 'JWT', 'alg': 'HS256'})}.{enc(payload)}"
        sig = base64.urlsafe_b64encode(hmac.new(secret, signing_input.encode(), hashlib.sha256).digest())
        return f"{signing_input}.{sig.rstrip(b'=').decode()}"

    return sign
