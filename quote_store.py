"""
Quote Store for the quote service.
Holds the ordered, append-only collection of quote records loaded once at
startup, and answers the read queries used by the API.
"""

from __future__ import annotations
import json
import math
import random
import threading
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import List, Dict, Any, Optional, Iterable

from utils import (
    store_logger, config_manager, log_execution, resolve_path,
    DataLoadError, ErrorCodes, QuoteNotFoundError, CategoryNotFoundError, EmptyStoreError
)
from utils.validation import QueryValidator, DataValidator

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 11
DEFAULT_CATEGORY = "general"


@dataclass(frozen=True)
class Quote:
    """语录记录"""
    id: int
    text: str
    author: str
    category: str = DEFAULT_CATEGORY

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class QuotePage:
    """分页查询结果"""
    page: int
    limit: int
    total: int
    total_pages: int
    quotes: List[Quote]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'page': self.page,
            'limit': self.limit,
            'total': self.total,
            'totalPages': self.total_pages,
            'quotes': [q.to_dict() for q in self.quotes]
        }


class QuoteStore:
    """内存语录存储（只追加）"""

    def __init__(self, quotes: Optional[Iterable[Quote]] = None,
                 default_limit: int = DEFAULT_LIMIT,
                 default_category: str = DEFAULT_CATEGORY,
                 rng: Optional[random.Random] = None):
        self._quotes: List[Quote] = []
        self._by_id: Dict[int, Quote] = {}
        self._lock = threading.Lock()
        self.default_limit = default_limit
        self.default_category = default_category
        self._rng = rng or random.Random()

        for quote in quotes or []:
            if quote.id in self._by_id:
                raise DataLoadError(
                    f"Duplicate quote id in source data: {quote.id}",
                    ErrorCodes.DATA_DUPLICATE_ID,
                    context={"id": quote.id}
                )
            self._append(quote)

    def __len__(self) -> int:
        return len(self._quotes)

    def _append(self, quote: Quote) -> None:
        self._quotes.append(quote)
        self._by_id[quote.id] = quote

    # ========================================================================
    # 查询
    # ========================================================================

    def list_quotes(self, page: Any = None, limit: Any = None) -> QuotePage:
        """分页获取语录，非法参数回退到默认值"""
        page = QueryValidator.positive_int(page, DEFAULT_PAGE)
        limit = QueryValidator.positive_int(limit, self.default_limit)

        snapshot = self._quotes
        total = len(snapshot)
        start = (page - 1) * limit

        return QuotePage(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit),
            quotes=snapshot[start:start + limit]
        )

    def random_quote(self) -> Quote:
        """随机获取一条语录"""
        snapshot = self._quotes
        if not snapshot:
            raise EmptyStoreError()
        return snapshot[self._rng.randrange(len(snapshot))]

    def by_id(self, quote_id: Any) -> Quote:
        """根据ID获取语录"""
        parsed = QueryValidator.parse_int(quote_id)
        quote = self._by_id.get(parsed) if parsed is not None else None
        if quote is None:
            raise QuoteNotFoundError(parsed)
        return quote

    def by_category(self, category: str) -> List[Quote]:
        """按分类获取语录（大小写不敏感）"""
        wanted = (category or "").lower()
        matches = [q for q in self._quotes if q.category.lower() == wanted]
        if not matches:
            raise CategoryNotFoundError(wanted)
        return matches

    def categories(self) -> List[str]:
        """获取去重后的分类列表，保持首次出现顺序"""
        return list(dict.fromkeys(q.category for q in self._quotes))

    # ========================================================================
    # 写入
    # ========================================================================

    def add(self, text: Optional[str], author: Optional[str],
            category: Optional[str] = None) -> Quote:
        """新增语录，ID 为当前数量 + 1"""
        DataValidator.validate_new_quote({'text': text, 'author': author})

        with self._lock:
            new_id = len(self._quotes) + 1
            if new_id in self._by_id:
                # 源数据ID不连续时避免冲突
                new_id = max(self._by_id) + 1
                store_logger.warning(f"[QuoteStore] Id {len(self._quotes) + 1} already taken, using {new_id}")

            quote = Quote(
                id=new_id,
                text=text,
                author=author,
                category=category or self.default_category
            )
            self._append(quote)

        store_logger.info(f"[QuoteStore] Added quote {quote.id} ({quote.category})")
        return quote


# ============================================================================
# 加载
# ============================================================================

def _parse_record(record: Dict[str, Any], index: int, default_category: str) -> Quote:
    try:
        quote_id = record['id']
        text = record['text']
        author = record['author']
    except (KeyError, TypeError) as e:
        raise DataLoadError(
            f"Quote record #{index} is missing a required field: {e}",
            ErrorCodes.DATA_INVALID_FORMAT,
            context={"index": index}
        ) from e

    if not isinstance(quote_id, int) or isinstance(quote_id, bool) or quote_id <= 0:
        raise DataLoadError(
            f"Quote record #{index} has an invalid id: {quote_id!r}",
            ErrorCodes.DATA_INVALID_FORMAT,
            context={"index": index}
        )

    return Quote(
        id=quote_id,
        text=text,
        author=author,
        category=record.get('category') or default_category
    )


@log_execution("QuoteStore", "load")
def load_quotes(path: Path, default_category: str = DEFAULT_CATEGORY) -> List[Quote]:
    """从JSON文件加载语录列表"""
    path = Path(path)
    if not path.is_file():
        raise DataLoadError(
            f"Quote data file not found: {path}",
            ErrorCodes.DATA_FILE_NOT_FOUND,
            context={"path": str(path)}
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except json.JSONDecodeError as e:
        raise DataLoadError(
            f"Invalid JSON in quote data file {path}: {e}",
            ErrorCodes.DATA_INVALID_FORMAT,
            context={"path": str(path)}
        ) from e

    if not isinstance(records, list):
        raise DataLoadError(
            f"Quote data file must contain a JSON array: {path}",
            ErrorCodes.DATA_INVALID_FORMAT,
            context={"path": str(path)}
        )

    return [_parse_record(record, i, default_category) for i, record in enumerate(records)]


def create_quote_store(data_file: Optional[str] = None) -> QuoteStore:
    """按配置创建语录存储"""
    app_config = config_manager.get_app_config()
    path = resolve_path(data_file or app_config.data_file)

    quotes = load_quotes(path, app_config.default_category)
    store = QuoteStore(
        quotes,
        default_limit=app_config.default_page_size,
        default_category=app_config.default_category
    )
    store_logger.info(f"[QuoteStore] Loaded {len(store)} quotes from {path}")
    return store
