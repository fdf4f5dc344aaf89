from portfolio.client.context import PortfolioContext
from portfolio.client.events import default_dispatcher
from portfolio.client.render import PortfolioRenderer


def test_cards_use_data_attributes_and_escape(project_store):
    project_store.add({
        "title": "<script>alert(1)</script>", "description": "d", "technologies": "Go", "category": "web",
    })
    html = PortfolioRenderer().render_cards(project_store.projects)
    assert "onclick" not in html
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
    for project in project_store.projects:
        assert f'data-action="delete" data-project-id="{project.id}"' in html


def test_hidden_cards_follow_filter(project_store):
    project_store.add({"title": "X", "description": "d", "technologies": "Go", "category": "web"})
    context = PortfolioContext(store=project_store, renderer=PortfolioRenderer(), active_filter="web")
    html = context.render()
    assert html.count("hidden") == 1
    assert html.count('class="project-card') == 2


def test_dispatcher_delete_declined_keeps_record(project_store):
    context = PortfolioContext(store=project_store, renderer=PortfolioRenderer())
    seed_id = project_store.projects[0].id
    default_dispatcher().dispatch(context, {"action": "delete", "projectId": seed_id})
    assert len(project_store.projects) == 1
    assert context.notifications == []


def test_page_marks_active_filter(project_store):
    context = PortfolioContext(store=project_store, renderer=PortfolioRenderer(), active_filter="game")
    html = context.render_page()
    assert 'class="filter-btn active" data-action="filter" data-filter="game"' in html
    assert 'id="projects-grid"' in html


def test_home_page_honours_category(client):
    resp = client.get("/", params={"category": "game"})
    assert resp.status_code == 200
    assert 'class="filter-btn active" data-action="filter" data-filter="game"' in resp.text

def test_home_page_renders(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "Pacman Game" in resp.text
    assert 'data-filter="game"' in resp.text


def test_add_then_filter_then_delete_through_routes(client, project_store):
    resp = client.post("/portfolio/projects", data={
        "title": "X", "description": "d", "technologies": "Go, Rust", "category": "web",
    })
    assert resp.status_code == 201
    assert resp.json()["notifications"][0]["kind"] == "success"
    x_id = project_store.projects[-1].id

    filtered = client.post("/portfolio/events", json={"action": "filter", "category": "web"}).json()
    assert filtered["html"].count("hidden") == 1

    deleted = client.post("/portfolio/events", json={"action": "delete", "projectId": x_id, "confirmed": True})
    assert deleted.status_code == 200
    assert deleted.json()["notifications"][0]["message"] == "Project deleted successfully!"
    assert [p.title for p in project_store.projects] == ["Pacman Game"]


def test_add_failure_reports_error_notification(client, project_store):
    resp = client.post("/portfolio/projects", data={"title": "X", "category": "web"})
    assert resp.status_code == 400
    assert resp.json()["notifications"][0]["kind"] == "error"
    assert len(project_store.projects) == 1


def test_unknown_event_action(client):
    assert client.post("/portfolio/events", json={"action": "explode"}).status_code == 400
