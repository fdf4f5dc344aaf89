import json

import pytest

from config import client_store_config
from portfolio.client.store import ProjectStore, deserialize_projects, serialize_projects
from portfolio.utils.errors import NotFoundError, ValidationFailedError

KEY = client_store_config["STORAGE_KEY"]


def _always(_message):
    return True


def test_seeds_when_nothing_persisted(project_store):
    assert [p.title for p in project_store.projects] == ["Pacman Game"]
    assert project_store.projects[0].category == "game"


def test_falls_back_to_seed_on_malformed_data(storage):
    storage.set_item(KEY, "{not json")
    assert [p.title for p in ProjectStore(storage).projects] == ["Pacman Game"]

    storage.set_item(KEY, json.dumps([{"id": 1, "title": "No description"}]))
    assert [p.title for p in ProjectStore(storage).projects] == ["Pacman Game"]


def test_serialization_roundtrip(project_store):
    project_store.add({"title": "X", "description": "d", "technologies": "Go, Rust", "category": "web"})
    raw = serialize_projects(project_store.projects)
    assert deserialize_projects(raw) == project_store.projects


def test_add_assigns_unique_ids_and_defaults(project_store):
    a = project_store.add({"title": "A", "description": "d", "technologies": "Go", "category": "web"})
    b = project_store.add({"title": "B", "description": "d", "technologies": "Go", "category": "web"})
    assert a.id != b.id
    assert len({p.id for p in project_store.projects}) == 3
    assert a.image_url == client_store_config["PLACEHOLDER_IMAGE"]


def test_add_persists_across_reload(storage, project_store):
    project_store.add({"title": "A", "description": "d", "technologies": "Go", "category": "mobile"})
    reloaded = ProjectStore(storage)
    assert [p.title for p in reloaded.projects] == ["Pacman Game", "A"]


def test_add_rejects_invalid_fields(project_store):
    with pytest.raises(ValidationFailedError):
        project_store.add({"title": "A", "description": "d", "technologies": "Go", "category": "Game"})
    with pytest.raises(ValidationFailedError):
        project_store.add({"title": "", "description": "d", "technologies": "Go", "category": "web"})
    assert len(project_store.projects) == 1


def test_delete_requires_confirmation(project_store):
    seed_id = project_store.projects[0].id
    assert project_store.delete(seed_id, confirm=lambda _m: False) is False
    assert len(project_store.projects) == 1


def test_delete_unknown_id_is_not_found(storage, project_store):
    project_store.save()
    with pytest.raises(NotFoundError):
        project_store.delete(424242, confirm=_always)
    assert len(json.loads(storage.get_item(KEY))) == 1


def test_filter_does_not_mutate(project_store):
    project_store.add({"title": "X", "description": "d", "technologies": "Go", "category": "web"})
    assert [p.title for p in project_store.filter("Web")] == []
    assert [p.title for p in project_store.filter("web")] == ["X"]
    assert len(project_store.projects) == 2


def test_add_filter_delete_scenario(storage, project_store):
    x = project_store.add({"title": "X", "description": "d", "category": "web", "technologies": "Go, Rust"})
    assert x.technologies == ["Go", "Rust"]

    assert [p.title for p in project_store.filter("web")] == ["X"]
    assert [p.title for p in project_store.filter("all")] == ["Pacman Game", "X"]

    assert project_store.delete(x.id, confirm=_always) is True
    assert [p.title for p in project_store.projects] == ["Pacman Game"]
    assert len(json.loads(storage.get_item(KEY))) == 1
