"""
API routes for the quote service.
Each handler coerces its parameters, delegates to the QuoteStore and returns
JSON. Domain errors propagate to the exception handlers registered in app.py.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Request

from quote_store import QuoteStore
from utils import api_logger
from .models import (
    QuoteResponse,
    QuoteCreateRequest,
    QuoteListResponse,
    CategoryQuotesResponse,
    CategoriesResponse,
    ErrorResponse
)

router = APIRouter()


def get_store(request: Request) -> QuoteStore:
    """获取应用持有的语录存储"""
    return request.app.state.quote_store


def read_route(path: str, **kwargs):
    """注册 GET 路由，同时注册不进入文档的 HEAD 路由"""
    def decorator(func):
        router.add_api_route(path, func, methods=["HEAD"], include_in_schema=False, **kwargs)
        return router.get(path, **kwargs)(func)
    return decorator


# Quotes
@read_route("/quotes", response_model=QuoteListResponse, tags=["Quotes"])
async def list_quotes(
    page: Optional[str] = Query(None, description="页码，默认 1"),
    limit: Optional[str] = Query(None, description="每页数量，默认 11"),
    store: QuoteStore = Depends(get_store)
):
    """分页获取语录"""
    return store.list_quotes(page, limit).to_dict()


@read_route("/quotes/random", response_model=QuoteResponse, tags=["Quotes"],
           responses={404: {"model": ErrorResponse}})
async def random_quote(store: QuoteStore = Depends(get_store)):
    """随机获取一条语录"""
    return store.random_quote().to_dict()


@read_route("/quotes/category/{category}", response_model=CategoryQuotesResponse, tags=["Quotes"],
           responses={404: {"model": ErrorResponse}})
async def quotes_by_category(category: str, store: QuoteStore = Depends(get_store)):
    """按分类获取语录"""
    quotes = store.by_category(category)
    return {
        "category": category.lower(),
        "count": len(quotes),
        "quotes": [q.to_dict() for q in quotes]
    }


@read_route("/quotes/{quote_id}", response_model=QuoteResponse, tags=["Quotes"],
           responses={404: {"model": ErrorResponse}})
async def quote_by_id(quote_id: str, store: QuoteStore = Depends(get_store)):
    """根据ID获取语录"""
    return store.by_id(quote_id).to_dict()


@router.post("/quotes", response_model=QuoteResponse, status_code=201, tags=["Quotes"],
             responses={400: {"model": ErrorResponse}})
async def create_quote(
    payload: Optional[QuoteCreateRequest] = None,
    store: QuoteStore = Depends(get_store)
):
    """新增语录"""
    payload = payload or QuoteCreateRequest()
    quote = store.add(payload.text, payload.author, payload.category)
    api_logger.info(f"[API] Created quote {quote.id} by {quote.author}")
    return quote.to_dict()


# Categories
@read_route("/categories", response_model=CategoriesResponse, tags=["Categories"])
async def list_categories(store: QuoteStore = Depends(get_store)):
    """获取所有分类"""
    categories = store.categories()
    return {
        "count": len(categories),
        "categories": categories
    }
