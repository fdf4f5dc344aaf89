from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request, Response, status
from fastapi.responses import HTMLResponse
from typing import List, Optional

from portfolio.client.context import Notification, PortfolioContext
from portfolio.client.events import default_dispatcher
from portfolio.client.render import PortfolioRenderer
from portfolio.client.store import ProjectStore
from portfolio.models.base import CamelModel
from portfolio.models.project.project import ALL_CATEGORIES
from portfolio.utils.errors import ValidationFailedError

router = APIRouter()
renderer = PortfolioRenderer()
dispatcher = default_dispatcher()


class PortfolioEvent(CamelModel):
    action: str
    project_id: Optional[int] = None
    category: Optional[str] = None
    confirmed: bool = False


class PortfolioUpdateOut(CamelModel):
    html: str
    notifications: List[Notification]


def get_project_store(request: Request) -> ProjectStore:
    return request.app.state.project_store


def _context(store: ProjectStore, active_filter: Optional[str], confirmed: bool = False) -> PortfolioContext:
    return PortfolioContext(
        store=store,
        renderer=renderer,
        confirm=lambda _message: confirmed,
        active_filter=active_filter or ALL_CATEGORIES,
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def portfolio_home(
    request: Request,
    category: str = Query(ALL_CATEGORIES),
    store: ProjectStore = Depends(get_project_store),
):
    return _context(store, category).page_response(request)


@router.get("/portfolio/cards", response_class=HTMLResponse)
async def portfolio_cards(
    category: str = Query(ALL_CATEGORIES),
    store: ProjectStore = Depends(get_project_store),
):
    return HTMLResponse(content=_context(store, category).render())


@router.post("/portfolio/projects", response_model=PortfolioUpdateOut, status_code=status.HTTP_201_CREATED)
async def portfolio_add_project(
    response: Response,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    technologies: Optional[str] = Form(None),
    demoUrl: Optional[str] = Form(None),
    githubUrl: Optional[str] = Form(None),
    imageUrl: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    category_filter: str = Form(ALL_CATEGORIES),
    store: ProjectStore = Depends(get_project_store),
):
    context = _context(store, category_filter)
    record = context.add_project({
        "title": title,
        "description": description,
        "technologies": technologies,
        "demoUrl": demoUrl,
        "githubUrl": githubUrl,
        "imageUrl": imageUrl,
        "category": category,
    })
    if record is None:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return PortfolioUpdateOut(html=context.render(), notifications=context.notifications)


@router.post("/portfolio/events", response_model=PortfolioUpdateOut)
async def portfolio_event(event: PortfolioEvent, store: ProjectStore = Depends(get_project_store)):
    context = _context(store, event.category, event.confirmed)
    try:
        html = dispatcher.dispatch(context, event.model_dump(by_alias=True))
    except ValidationFailedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return PortfolioUpdateOut(html=html, notifications=context.notifications)
