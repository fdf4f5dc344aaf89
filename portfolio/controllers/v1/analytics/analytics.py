from fastapi import APIRouter

from portfolio.models.analytics.analytics import AnalyticsOut
from portfolio.services.analytics.analytics import get_analytics_helper
from portfolio.utils.errors import PortfolioError
from portfolio.utils.http_errors import to_http_exception


router = APIRouter()


@router.get("/api/analytics", response_model=AnalyticsOut)
async def analytics_snapshot():
    try:
        return await get_analytics_helper()
    except PortfolioError as e:
        raise to_http_exception(e) from e
