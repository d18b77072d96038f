import random

import pytest

import search_gateway.lib.sample_data as sd
from search_gateway.services.index_setup import ensure_index, get_document_mapping, get_index_settings

from tests.fakes import MockES


def test_generated_documents_respect_invariants():
    docs = sd.generate_random_documents(40, random.Random(7))

    assert len(docs) == 40
    assert len({d.id for d in docs}) == 40
    for d in docs:
        assert d.category in sd.CATEGORIES
        assert d.category in d.title
        assert d.author in sd.AUTHORS
        assert 2 <= len(d.tags) <= 4
        assert len(set(d.tags)) == len(d.tags)
        assert d.last_updated_date >= d.created_date
        assert 3 <= d.content.count("\n\n") + 1 <= 7


def test_generation_is_reproducible_with_a_seed():
    a = sd.generate_random_documents(3, random.Random(1))
    b = sd.generate_random_documents(3, random.Random(1))
    assert [d.title for d in a] == [d.title for d in b]
    assert [d.id for d in a] == [d.id for d in b]


def test_random_tags_caps_at_available_tags():
    tags = sd.random_tags(random.Random(0), 100)
    assert sorted(tags) == sorted(sd.TAGS)


# ----------------------- seeding -----------------------

def test_seed_creates_index_and_bulk_loads(monkeypatch):
    es = MockES(index_exists=False, count=0)
    sent = {}

    def fake_bulk(client, actions, **kwargs):
        sent["actions"] = list(actions)
        sent["kwargs"] = kwargs
        return len(sent["actions"]), []

    monkeypatch.setattr(sd, "bulk", fake_bulk, raising=True)

    assert sd.seed_sample_data(es, "documents", 5) == 5
    creates = [kw for name, kw in es.calls if name == "indices.create"]
    assert creates == [
        {"index": "documents", "mappings": get_document_mapping(), "settings": get_index_settings()}
    ]

    action = sent["actions"][0]
    assert action["_index"] == "documents"
    assert "id" not in action["_source"]
    assert {"createdDate", "lastUpdatedDate", "tags"} <= set(action["_source"])


def test_seed_skips_populated_index(monkeypatch):
    es = MockES(index_exists=True, count=12)
    monkeypatch.setattr(sd, "bulk", lambda *a, **k: pytest.fail("bulk should not run"), raising=True)
    assert sd.seed_sample_data(es, "documents", 5) == 0


def test_seed_failure_is_logged_not_raised():
    es = MockES(exists_exc=RuntimeError("cluster down"))
    assert sd.seed_sample_data(es, "documents", 5) == 0


def test_ensure_index_is_a_noop_when_present():
    es = MockES(index_exists=True)
    assert ensure_index(es, "documents") is False
    assert [c[0] for c in es.calls] == ["indices.exists"]
