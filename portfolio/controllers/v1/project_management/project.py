from fastapi import APIRouter, File, Form, Query, UploadFile, status
from typing import List, Optional

from portfolio.models.project.project import ProjectOut
from portfolio.services.project_management.project import (
    create_project_helper,
    get_projects_helper,
    get_project_helper,
    update_project_helper,
    delete_project_helper,
)
from portfolio.utils.errors import PortfolioError
from portfolio.utils.http_errors import to_http_exception


router = APIRouter()


def _form_flag(value: Optional[str]) -> bool:
    return str(value).strip().lower() in ("true", "on", "1")


def _form_fields(title, description, technologies, demo_url, github_url, category, featured) -> dict:
    return {
        "title": title,
        "description": description,
        "technologies": technologies,
        "demoUrl": demo_url,
        "githubUrl": github_url,
        "category": category,
        "featured": _form_flag(featured),
    }


@router.get("/api/projects", response_model=List[ProjectOut])
async def list_projects(
    category: Optional[str] = Query(None, description="Category to filter, 'all' for no filter"),
    featured: Optional[bool] = Query(None, description="true for featured projects only; false or absent returns all"),
):
    try:
        return await get_projects_helper(category, featured)
    except PortfolioError as e:
        raise to_http_exception(e) from e


@router.get("/api/projects/{project_id}", response_model=ProjectOut)
async def get_project(project_id: str):
    try:
        return await get_project_helper(project_id)
    except PortfolioError as e:
        raise to_http_exception(e) from e


@router.post("/api/projects", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
async def create_project(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    technologies: Optional[str] = Form(None),
    demoUrl: Optional[str] = Form(None),
    githubUrl: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    featured: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
):
    fields = _form_fields(title, description, technologies, demoUrl, githubUrl, category, featured)
    try:
        return await create_project_helper(fields, image)
    except PortfolioError as e:
        raise to_http_exception(e) from e


@router.put("/api/projects/{project_id}", response_model=ProjectOut)
async def update_project(
    project_id: str,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    technologies: Optional[str] = Form(None),
    demoUrl: Optional[str] = Form(None),
    githubUrl: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    featured: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
):
    fields = _form_fields(title, description, technologies, demoUrl, githubUrl, category, featured)
    try:
        return await update_project_helper(project_id, fields, image)
    except PortfolioError as e:
        raise to_http_exception(e) from e


@router.delete("/api/projects/{project_id}", response_model=dict)
async def delete_project(project_id: str):
    try:
        return await delete_project_helper(project_id)
    except PortfolioError as e:
        raise to_http_exception(e) from e
