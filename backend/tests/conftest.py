"""
Shared fixtures - an in-memory stand-in for the Notion client
"""
import itertools
from typing import Any, Dict, List

import pytest

from habitsync.core import dependencies
from habitsync.core.config import settings


class FakeNotionError(Exception):
    """Carries a Notion error code the way the client's API errors do"""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


def _as_returned(properties: Dict[str, Any]) -> Dict[str, Any]:
    """Add plain_text to text segments, as Notion does in responses"""
    returned = {}
    for name, value in properties.items():
        value = dict(value)
        for key in ("title", "rich_text"):
            if key in value:
                value[key] = [
                    {**segment, "plain_text": segment["text"]["content"]}
                    for segment in value[key]
                ]
        returned[name] = value
    return returned


class FakeNotion:
    """Records pages in memory and answers Date title queries"""

    def __init__(self):
        self.store: List[Dict[str, Any]] = []
        self.queries: List[Dict[str, Any]] = []
        self.creates = 0
        self.updates = 0
        self.error = None
        self._ids = itertools.count(1)
        self.databases = _Databases(self)
        self.pages = _Pages(self)

    def _raise_if_failing(self):
        if self.error is not None:
            raise self.error

    def add_page(self, properties: Dict[str, Any]) -> Dict[str, Any]:
        page = {
            "id": f"page-{next(self._ids)}",
            "created_order": len(self.store),
            "properties": _as_returned(properties),
        }
        self.store.append(page)
        return page


class _Databases:
    def __init__(self, notion: FakeNotion):
        self._notion = notion

    def query(self, **kwargs):
        self._notion._raise_if_failing()
        self._notion.queries.append(kwargs)
        wanted = kwargs["filter"]["title"]["equals"]
        results = [
            page for page in self._notion.store
            if page["properties"]["Date"]["title"][0]["plain_text"] == wanted
        ]
        if kwargs.get("sorts"):
            results.sort(key=lambda page: page["created_order"], reverse=True)
        return {"object": "list", "results": results}


class _Pages:
    def __init__(self, notion: FakeNotion):
        self._notion = notion

    def create(self, parent, properties):
        self._notion._raise_if_failing()
        self._notion.creates += 1
        return self._notion.add_page(properties)

    def update(self, page_id, properties):
        self._notion._raise_if_failing()
        self._notion.updates += 1
        for page in self._notion.store:
            if page["id"] == page_id:
                page["properties"] = _as_returned(properties)
                return page
        raise FakeNotionError("object_not_found", f"Could not find page with ID: {page_id}")


@pytest.fixture
def notion(monkeypatch):
    """Configured settings plus a fake Notion client"""
    fake = FakeNotion()
    monkeypatch.setattr(settings, "NOTION_KEY", "secret_test")
    monkeypatch.setattr(settings, "NOTION_DB_ID", "1234-abcd")
    dependencies.set_notion_client(fake)
    yield fake
    dependencies.set_notion_client(None)


@pytest.fixture
def unconfigured(monkeypatch):
    monkeypatch.setattr(settings, "NOTION_KEY", "")
    monkeypatch.setattr(settings, "NOTION_DB_ID", "")
    dependencies.set_notion_client(None)
