from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from search_gateway.models.search import SearchRequest

# ---------------- Defaults --------------------------------------

DEFAULT_TEXT_FIELDS: Tuple[str, ...] = ("title", "content")

# author/category/tags are mapped as keyword already (see services/index_setup.py);
# these entries cover names callers send from older clients.
FIELD_MAP_DOCUMENTS: Dict[str, str] = {
    "author.keyword": "author",
    "category.keyword": "category",
    "tags.keyword": "tags",
    "tag": "tags",
}

# ---------------- Translated query ------------------------------


@dataclass(frozen=True)
class PageWindow:
    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class NativeQuery:
    """
    The pieces of an ES search request, named after the keyword arguments of
    Elasticsearch.search() so they can be passed straight through.
    """

    query: Dict[str, Any]
    sort: List[Dict[str, Any]] = field(default_factory=list)
    min_score: Optional[float] = None

    def to_search_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"query": self.query}
        if self.sort:
            kwargs["sort"] = self.sort
        if self.min_score is not None:
            kwargs["min_score"] = self.min_score
        return kwargs


# ---------------- Field normalisation ---------------------------

# Exact-match filters (term/terms) must hit keyword fields. author, category
# and tags are already keyword in the index mapping; only the aliases listed
# in FIELD_MAP_DOCUMENTS are rewritten, anything else is passed through.

def normalise_filter_field(name: str, field_map: Optional[Dict[str, str]] = None) -> str:
    if field_map and name in field_map:
        return field_map[name]
    return name


# ---------------- Clause builders -------------------------------

def build_text_clause(text: str, fields: List[str]) -> Dict[str, Any]:
    """Match `text` against any one of `fields` (OR)."""
    should = [{"match": {f: {"query": text}}} for f in fields]
    return {"bool": {"should": should, "minimum_should_match": 1}}


def build_filter_clauses(filters: Dict[str, Any]) -> List[Dict[str, Any]]:
    clauses: List[Dict[str, Any]] = []
    for name, value in filters.items():
        target = normalise_filter_field(name, FIELD_MAP_DOCUMENTS)
        if isinstance(value, list):
            clauses.append({"terms": {target: value}})
        else:
            clauses.append({"term": {target: value}})
    return clauses


def build_date_range(field_name: str, date_from: Optional[str], date_to: Optional[str]) -> Optional[Dict[str, Any]]:
    bounds: Dict[str, Any] = {}
    if date_from:
        bounds["gte"] = date_from
    if date_to:
        bounds["lte"] = date_to
    if not bounds:
        return None
    return {"range": {field_name: bounds}}


def build_sort(sort: Dict[str, str]) -> List[Dict[str, Any]]:
    """
    Keep the caller's field order; ties fall back to relevance. (_id is not
    sortable on ES 8 without fielddata, so score is the last key.)
    """
    if not sort:
        return []
    out: List[Dict[str, Any]] = [{f: {"order": d}} for f, d in sort.items()]
    if "_score" not in sort:
        out.append({"_score": {"order": "desc"}})
    return out


# ---------------- Translate -------------------------------------

def translate(request: SearchRequest) -> Tuple[NativeQuery, PageWindow]:
    """
    Turn a validated SearchRequest into an ES query plus its page window.

    Query shape:
      bool.must   -> disjunctive match of the text across the target fields
      bool.filter -> exact-match filters and the date range (no scoring)
    """
    fields = list(request.fields) or list(DEFAULT_TEXT_FIELDS)
    text = request.query

    filter_clauses = build_filter_clauses(request.filters)
    date_range = build_date_range(request.date_field, request.date_from, request.date_to)
    if date_range:
        filter_clauses.append(date_range)

    text_clause = build_text_clause(text, fields)
    if filter_clauses:
        query = {"bool": {"must": [text_clause], "filter": filter_clauses}}
    else:
        query = text_clause

    native = NativeQuery(
        query=query,
        sort=build_sort(request.sort),
        min_score=request.min_score,
    )
    return native, PageWindow(page=request.page, size=request.size)
