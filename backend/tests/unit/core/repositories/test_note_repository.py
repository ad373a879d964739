"""Tests for NoteRepository against SQLite in-memory."""

from datetime import datetime, timezone

import pytest

from notekeep.core.repositories.note_repository import NoteRepository


def _note(title, content="content"):
    return {"title": title, "content": content, "created_at": datetime.now(timezone.utc)}


@pytest.fixture
def repo(test_session):
    return NoteRepository(test_session)


async def test_create_allocates_positive_increasing_ids(repo):
    first = await repo.create_note(_note("first"))
    second = await repo.create_note(_note("second"))

    assert first.id > 0
    assert second.id > first.id
    assert second.updated_at is None


async def test_get_exists_and_list(repo):
    created = await repo.create_note(_note("one"))
    await repo.create_note(_note("two"))

    assert (await repo.get_by_id(created.id)).title == "one"
    assert await repo.get_by_id(9999) is None
    assert await repo.exists(created.id) is True
    assert await repo.exists(9999) is False
    assert [n.title for n in await repo.list_notes()] == ["one", "two"]


async def test_update_and_delete(repo):
    created = await repo.create_note(_note("old"))

    updated = await repo.update_note(created.id, {"title": "new"})
    assert updated.title == "new"
    assert await repo.update_note(9999, {"title": "x"}) is None

    assert await repo.delete_note(created.id) is True
    assert await repo.get_by_id(created.id) is None
    assert await repo.delete_note(created.id) is False


async def test_search_matches_title_or_content_with_paging(repo):
    await repo.create_note(_note("importante: pagar", "facturas"))
    await repo.create_note(_note("lista", "algo importante aqui"))
    await repo.create_note(_note("otra", "nada"))

    notes, total = await repo.search_notes("importante", 0, 1)
    assert total == 2
    assert [n.title for n in notes] == ["importante: pagar"]

    notes, total = await repo.search_notes("importante", 1, 1)
    assert total == 2
    assert [n.title for n in notes] == ["lista"]

    notes, total = await repo.search_notes("importante", 2, 1)
    assert total == 2
    assert notes == []


async def test_search_treats_wildcards_literally(repo):
    await repo.create_note(_note("100% done"))
    await repo.create_note(_note("1000 done"))

    notes, total = await repo.search_notes("0%", 0, 10)
    assert total == 1
    assert notes[0].title == "100% done"

    _, total = await repo.search_notes("_", 0, 10)
    assert total == 0
