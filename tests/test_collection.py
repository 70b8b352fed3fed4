"""Tests for the paginated Collection."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from urllib.parse import parse_qs, urlparse

import pytest

from uservoice import ApplicationError, Collection, NotFound


class FakeClient:
    """Serves ``total`` tickets with ids 0..total-1 from a list envelope."""

    def __init__(self, total, delay=0.0, fail_on_page=None):
        self.total = total
        self.delay = delay
        self.fail_on_page = fail_on_page
        self.calls = []
        self._calls_lock = threading.Lock()

    def get(self, path):
        with self._calls_lock:
            self.calls.append(path)
        if self.delay:
            time.sleep(self.delay)

        query = parse_qs(urlparse(path).query)
        per_page = int(query["per_page"][0])
        page = int(query["page"][0])
        if page == self.fail_on_page:
            raise ApplicationError("boom")

        start = (page - 1) * per_page
        return {
            "response_data": {"page": page, "per_page": per_page, "total_records": self.total},
            "tickets": [{"id": i} for i in range(start, min(start + per_page, self.total))],
        }


class StaticClient:
    def __init__(self, result):
        self.result = result

    def get(self, path):
        return self.result


class TestSize:
    def test_size_fetches_first_page(self):
        client = FakeClient(250)
        collection = Collection(client, "/api/v1/tickets")
        assert collection.total_records is None
        assert collection.size() == 250
        assert len(collection) == 250
        assert client.calls == ["/api/v1/tickets?per_page=100&page=1"]

    def test_size_capped_by_limit(self):
        client = FakeClient(250)
        collection = Collection(client, "/api/v1/tickets", limit=5)
        assert collection.per_page == 5
        assert collection.size() == 5
        assert collection.total_records == 250
        with pytest.raises(IndexError):
            collection.get(5)

    def test_limit_above_page_cap(self):
        collection = Collection(FakeClient(1000), "/api/v1/tickets", limit=500)
        assert collection.per_page == 100
        assert collection.size() == 500

    def test_empty_collection(self):
        client = FakeClient(0)
        collection = Collection(client, "/api/v1/tickets")
        assert collection.size() == 0
        assert collection.is_empty()
        assert not collection
        assert list(collection) == []
        assert collection.to_list() == []
        with pytest.raises(IndexError):
            collection.get(0)

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            Collection(FakeClient(1), "/api/v1/tickets", limit=-1)


class TestGet:
    def test_items_resolve_to_owning_page(self):
        client = FakeClient(250)
        collection = Collection(client, "/api/v1/tickets")

        assert collection.get(0) == {"id": 0}
        assert collection.get(150) == {"id": 150}
        assert collection.get(249) == {"id": 249}
        assert client.calls == [
            "/api/v1/tickets?per_page=100&page=1",
            "/api/v1/tickets?per_page=100&page=2",
            "/api/v1/tickets?per_page=100&page=3",
        ]

    def test_repeated_get_is_memoized(self):
        client = FakeClient(250)
        collection = Collection(client, "/api/v1/tickets")
        first = collection.get(42)
        assert collection.get(42) is first
        assert len(client.calls) == 1

    def test_out_of_range(self):
        collection = Collection(FakeClient(3), "/api/v1/tickets")
        with pytest.raises(IndexError):
            collection.get(3)
        with pytest.raises(IndexError):
            collection.get(-1)

    def test_getitem_negative_and_slice(self):
        collection = Collection(FakeClient(250), "/api/v1/tickets")
        assert collection[-1] == {"id": 249}
        assert collection[98:102] == [{"id": 98}, {"id": 99}, {"id": 100}, {"id": 101}]

    def test_small_pages_follow_limit(self):
        client = FakeClient(50)
        collection = Collection(client, "/api/v1/tickets", limit=20)
        assert collection.get(13) == {"id": 13}
        assert client.calls[-1] == "/api/v1/tickets?per_page=20&page=1"


class TestLoadPage:
    def test_appends_to_existing_query_string(self):
        client = FakeClient(10)
        Collection(client, "/api/v1/tickets?sort=newest").load_page(1)
        assert client.calls == ["/api/v1/tickets?sort=newest&per_page=100&page=1"]

    def test_appends_query_string_to_bare_path(self):
        client = FakeClient(10)
        Collection(client, "/api/v1/tickets").load_page(3)
        assert client.calls == ["/api/v1/tickets?per_page=100&page=3"]

    def test_cached_page_is_not_refetched(self):
        client = FakeClient(250)
        collection = Collection(client, "/api/v1/tickets")
        page = collection.load_page(2)
        assert collection.load_page(2) is page
        assert len(client.calls) == 1

    def test_total_records_is_not_refreshed_by_later_pages(self):
        client = FakeClient(250)
        collection = Collection(client, "/api/v1/tickets")
        assert collection.size() == 250

        client.total = 120
        collection.load_page(2)
        assert collection.total_records == 250
        assert collection.size() == 250
        assert len(client.calls) == 2

    def test_concurrent_loads_fetch_once(self):
        client = FakeClient(250, delay=0.05)
        collection = Collection(client, "/api/v1/tickets")

        with ThreadPoolExecutor(max_workers=8) as pool:
            pages = list(pool.map(lambda _: collection.load_page(2), range(16)))

        assert len(client.calls) == 1
        assert all(page is pages[0] for page in pages)

    @pytest.mark.parametrize(
        "result",
        [
            {"tickets": [{"id": 1}]},
            {"ticket": {"id": 1}, "user": {"id": 2}},
            {"response_data": {"total_records": 1}, "tickets": [], "users": []},
            {"response_data": {"total_records": 1}, "ticket": {"id": 1}},
            {"response_data": {"page": 1}, "tickets": []},
            {"response_data": None, "tickets": []},
            [{"id": 1}],
            {},
        ],
    )
    def test_non_collection_raises_not_found(self, result):
        collection = Collection(StaticClient(result), "/api/v1/tickets/1")
        with pytest.raises(NotFound, match="not a collection"):
            collection.load_page(1)

    def test_item_key_is_independent_of_key_order(self):
        result = {"suggestions": [{"id": 1}], "response_data": {"total_records": 1}}
        collection = Collection(StaticClient(result), "/api/v1/suggestions")
        assert collection.load_page(1) == [{"id": 1}]
        assert collection.load_page(2) == [{"id": 1}]


class TestIteration:
    def test_iteration_is_restartable(self):
        client = FakeClient(120)
        collection = Collection(client, "/api/v1/tickets")
        first = [item["id"] for item in collection]
        second = [item["id"] for item in collection]
        assert first == second == list(range(120))
        assert len(client.calls) == 2

    def test_iteration_is_lazy(self):
        client = FakeClient(250)
        iterator = iter(Collection(client, "/api/v1/tickets"))
        assert client.calls == []
        assert next(iterator) == {"id": 0}
        assert len(client.calls) == 1

    def test_to_list(self):
        collection = Collection(FakeClient(150), "/api/v1/tickets", limit=120)
        items = collection.to_list()
        assert len(items) == 120
        assert items[-1] == {"id": 119}

    def test_iteration_surfaces_errors(self):
        collection = Collection(FakeClient(250, fail_on_page=2), "/api/v1/tickets")
        with pytest.raises(ApplicationError):
            list(collection)
