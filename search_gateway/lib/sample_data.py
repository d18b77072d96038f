"""
Random SearchableDocument generation for local development and demos.
"""

import logging
import random
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from elasticsearch import Elasticsearch
from elasticsearch.helpers import bulk

from search_gateway.models.documents import SearchableDocument
from search_gateway.services.index_setup import ensure_index

log = logging.getLogger(__name__)

CATEGORIES = [
    "Technology", "Science", "Business", "Finance", "Health",
    "Sports", "Entertainment", "Politics", "Education", "Environment",
]

AUTHORS = [
    "John Smith", "Emily Johnson", "Michael Brown", "Sarah Lee",
    "David Wilson", "Jennifer Garcia", "Robert Martinez", "Linda Anderson",
    "William Taylor", "Elizabeth Thomas",
]

TAGS = [
    "research", "report", "analysis", "guide", "tutorial",
    "review", "summary", "whitepaper", "case-study", "reference",
    "latest", "trending", "featured", "popular", "recommended",
]

TITLE_TEMPLATES = [
    "Comprehensive Guide to {}",
    "How to Master {} in 2025",
    "The Ultimate {} Handbook",
    "Understanding {}: A Deep Dive",
    "{} Fundamentals Explained",
    "Essential {} Strategies",
    "The Future of {}",
    "{} Best Practices",
    "Advanced {} Techniques",
    "{}: Trends and Insights",
]

CONTENT_SEGMENTS = [
    "This comprehensive document explores the fundamental aspects of the subject matter. ",
    "In recent years, significant developments have transformed this field. ",
    "Experts agree that the most critical factor to consider is thorough research. ",
    "According to the latest studies, the trend is likely to continue into the next decade. ",
    "Several case studies demonstrate the effectiveness of this approach. ",
    "The data indicates a strong correlation between these variables. ",
    "Best practices suggest implementing a structured methodology. ",
    "Analysis of key metrics reveals important insights about performance. ",
    "A comparative assessment of different techniques shows varying results. ",
    "Future developments will likely focus on improving efficiency and scalability. ",
    "Integration with existing systems remains a significant challenge. ",
    "Stakeholders should consider multiple factors before making decisions. ",
    "The implementation strategy should account for potential risks. ",
    "Continuous monitoring and evaluation are essential for success. ",
    "Feedback from users has been incorporated into the recommendations. ",
]

MAX_AGE_DAYS = 365 * 2


def random_content(rng: random.Random, paragraphs: int) -> str:
    # 3-6 sentences per paragraph, paragraphs separated by a blank line
    out = []
    for _ in range(paragraphs):
        sentences = rng.randint(3, 6)
        out.append("".join(rng.choice(CONTENT_SEGMENTS) for _ in range(sentences)).strip())
    return "\n\n".join(out)


def random_tags(rng: random.Random, count: int) -> List[str]:
    """`count` distinct tags, in draw order."""
    count = min(count, len(TAGS))
    picked: List[str] = []
    seen = set()
    while len(picked) < count:
        tag = rng.choice(TAGS)
        if tag in seen:
            continue
        seen.add(tag)
        picked.append(tag)
    return picked


def create_random_document(rng: Optional[random.Random] = None, now: Optional[datetime] = None) -> SearchableDocument:
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)

    category = rng.choice(CATEGORIES)
    created = now - timedelta(days=rng.randrange(MAX_AGE_DAYS))
    # somewhere between creation and now
    updated = created + (now - created) * rng.random()

    return SearchableDocument(
        id=str(uuid.UUID(int=rng.getrandbits(128), version=4)),
        title=rng.choice(TITLE_TEMPLATES).format(category),
        content=random_content(rng, rng.randint(3, 7)),
        author=rng.choice(AUTHORS),
        category=category,
        created_date=created,
        last_updated_date=updated,
        tags=random_tags(rng, rng.randint(2, 4)),
    )


def generate_random_documents(count: int, rng: Optional[random.Random] = None) -> List[SearchableDocument]:
    rng = rng or random.Random()
    now = datetime.now(timezone.utc)
    return [create_random_document(rng, now) for _ in range(count)]


def _bulk_actions(index: str, docs: List[SearchableDocument]) -> List[Dict[str, Any]]:
    return [
        {
            "_index": index,
            "_id": d.id,
            "_source": d.model_dump(mode="json", by_alias=True, exclude={"id"}),
        }
        for d in docs
    ]


def seed_sample_data(es: Elasticsearch, index: str, count: int) -> int:
    """
    Fill an empty index with `count` generated documents. Returns how many
    were written; 0 when the index already has data or seeding failed
    (failures are logged, never raised, so startup carries on).
    """
    log.info("Initializing Elasticsearch with %d sample documents", count)
    try:
        ensure_index(es, index)
        existing = int(es.count(index=index)["count"])
        if existing > 0:
            log.info("Elasticsearch already contains %d documents, skipping initialization", existing)
            return 0

        written, _ = bulk(es, _bulk_actions(index, generate_random_documents(count)), refresh="wait_for")
        log.info("Successfully initialized Elasticsearch with %d sample documents", written)
        return int(written)
    except Exception:
        log.exception("Failed to initialize Elasticsearch with sample data")
        return 0
