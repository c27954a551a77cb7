"""
API data models for the quote service.
Pydantic models for request/response validation.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


class QuoteResponse(BaseModel):
    """语录响应模型"""
    id: int = Field(..., description="语录ID")
    text: str = Field(..., description="语录内容")
    author: str = Field(..., description="作者")
    category: str = Field(..., description="分类")


class QuoteCreateRequest(BaseModel):
    """新增语录请求模型，必填校验由存储层完成"""
    text: Optional[str] = Field(None, description="语录内容")
    author: Optional[str] = Field(None, description="作者")
    category: Optional[str] = Field(None, description="分类，缺省为 general")


class QuoteListResponse(BaseModel):
    """分页语录响应模型"""
    page: int
    limit: int
    total: int
    totalPages: int
    quotes: List[QuoteResponse]


class CategoryQuotesResponse(BaseModel):
    """分类语录响应模型"""
    category: str
    count: int
    quotes: List[QuoteResponse]


class CategoriesResponse(BaseModel):
    """分类列表响应模型"""
    count: int
    categories: List[str]


class HealthResponse(BaseModel):
    """健康检查响应模型"""
    status: str = Field("healthy", description="服务状态")
    timestamp: str = Field(..., description="ISO-8601 时间戳")
    uptime: float = Field(..., description="运行时长（秒）")
    environment: str = Field(..., description="运行环境")
    quotesLoaded: int = Field(..., description="已加载语录数量")


class ErrorResponse(BaseModel):
    """错误响应模型"""
    error: str
    id: Optional[int] = None
    category: Optional[str] = None
    path: Optional[str] = None
