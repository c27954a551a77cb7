"""
pytest configuration and fixtures for Quote Service tests
"""

import json
import random
import shutil
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quote_store import Quote, QuoteStore
from api.app import create_app


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def sample_quotes():
    """Sample quotes covering repeated and mixed-case categories"""
    return [
        Quote(1, "The only way to do great work is to love what you do.", "Steve Jobs", "motivation"),
        Quote(2, "Life is what happens when you're busy making other plans.", "John Lennon", "life"),
        Quote(3, "It does not matter how slowly you go as long as you do not stop.", "Confucius", "Motivation"),
        Quote(4, "In the middle of difficulty lies opportunity.", "Albert Einstein", "wisdom"),
        Quote(5, "Believe you can and you're halfway there.", "Theodore Roosevelt", "motivation"),
    ]


@pytest.fixture
def quote_store(sample_quotes):
    """Fresh store per test"""
    return QuoteStore(sample_quotes, rng=random.Random(42))


@pytest.fixture
def empty_store():
    return QuoteStore([])


@pytest.fixture
def app(quote_store):
    """App built around the per-test store, without the static client"""
    return create_app(store=quote_store, serve_static=False)


@pytest.fixture
def client(app):
    """Create test client"""
    return TestClient(app)


@pytest.fixture
def quotes_file(temp_dir, sample_quotes):
    """Quote data file written from the sample quotes"""
    path = temp_dir / "quotes.json"
    with open(path, 'w', encoding='utf-8') as f:
        json.dump([q.to_dict() for q in sample_quotes], f)
    return path
