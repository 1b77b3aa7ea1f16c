import pytest

from pagewise import Paginator, PaginationSettings, CursorPagination, CursorEnvelope
from pagewise import exc
from pagewise.store import ListRecordStore
from pagewise.strategies import CursorStrategy, FetchResult

from .util.models import ids


@pytest.mark.parametrize(('request_kwargs', 'expected_ids', 'expected_meta'), [
    # First page
    (dict(cursor=0, page_size=2), [1, 2],
     dict(has_next_page=True, next_cursor=2, has_previous_page=False, previous_cursor=None)),
    # Next page
    (dict(cursor=2, page_size=2), [3, 4],
     dict(has_next_page=True, next_cursor=4, has_previous_page=True, previous_cursor=2)),
    # Last page: incomplete
    (dict(cursor=4, page_size=2), [5],
     dict(has_next_page=False, next_cursor=None, has_previous_page=True, previous_cursor=4)),
    # Last page: complete, nothing beyond it
    (dict(cursor=3, page_size=2), [4, 5],
     dict(has_next_page=False, next_cursor=None, has_previous_page=True, previous_cursor=3)),
    # Beyond the end
    (dict(cursor=5, page_size=2), [],
     dict(has_next_page=False, next_cursor=None, has_previous_page=True, previous_cursor=5)),
    (dict(cursor=100, page_size=2), [],
     dict(has_next_page=False, next_cursor=None, has_previous_page=True, previous_cursor=100)),
    # Previous page: rewinds two pages back from the cursor
    (dict(cursor=4, page_size=1, is_previous_page=True), [3],
     dict(has_next_page=True, next_cursor=3, has_previous_page=True, previous_cursor=4)),
    # Previous page: the bound goes below zero; starts from the beginning
    (dict(cursor=2, page_size=2, is_previous_page=True), [1, 2],
     dict(has_next_page=True, next_cursor=2, has_previous_page=True, previous_cursor=2)),
])
def test_cursor_pages(request_kwargs: dict, expected_ids: list[int], expected_meta: dict):
    """ Test: cursor pages and their metadata """
    paginator = Paginator(ListRecordStore(records(5)))
    res = paginator.paginate(CursorPagination(**request_kwargs))

    assert isinstance(res, CursorEnvelope)
    assert ids(res.data) == expected_ids
    assert res.total_count is None
    assert dict(
        has_next_page=res.has_next_page,
        next_cursor=res.next_cursor,
        has_previous_page=res.has_previous_page,
        previous_cursor=res.previous_cursor,
    ) == expected_meta


def test_cursor_peek_row():
    """ Test: one extra row is loaded, but never returned """
    store = RecordingStore(records(10))
    res = Paginator(store).paginate(CursorPagination(cursor=0, page_size=3))

    # Loaded 4 rows, returned 3
    assert store.scans == [('after', 0, 4)]
    assert ids(res.data) == [1, 2, 3]
    assert res.next_cursor == 3

    # Previous page: the lower bound is moved back by two pages
    store.scans.clear()
    Paginator(store).paginate(CursorPagination(cursor=9, page_size=3, is_previous_page=True))
    assert store.scans == [('after', 3, 4)]


def test_cursor_inspect():
    """ Test: inspect() trims the peek row in place """
    strategy = CursorStrategy(CursorPagination(cursor=0, page_size=2), PaginationSettings())

    result = FetchResult(items=records(3), total_count=None)
    page_info = strategy.inspect(result)
    assert ids(result.items) == [1, 2]
    assert page_info.has_next_page is True
    assert page_info.next_cursor == 2

    # Custom key name
    result = FetchResult(items=[{'pk': 10}, {'pk': 20}, {'pk': 30}], total_count=None)
    page_info = strategy.inspect(result, key='pk')
    assert page_info.next_cursor == 20

    # Page size 0: nothing on the page, no cursor
    strategy = CursorStrategy(CursorPagination(cursor=0, page_size=1), PaginationSettings())
    strategy.page_size = 0
    result = FetchResult(items=records(1), total_count=None)
    page_info = strategy.inspect(result)
    assert result.items == []
    assert page_info.has_next_page is True
    assert page_info.next_cursor is None


def test_cursor_total_count():
    """ Test: total count only when requested """
    store = RecordingStore(records(7))

    res = Paginator(store).paginate(CursorPagination(cursor=0, page_size=5))
    assert res.total_count is None
    assert store.counts == 0

    res = Paginator(store).paginate(CursorPagination(cursor=0, page_size=5, include_total_count=True))
    assert res.total_count == 7
    assert store.counts == 1


def test_cursor_walk():
    """ Test: following next_cursor from 0 visits every record exactly once, in order """
    # Ids with gaps, some records inactive
    store = ListRecordStore(
        [{'id': id, 'is_active': id % 7 != 0} for id in range(1, 300, 3)],
        where=lambda row: row['is_active'],
    )
    expected_ids = [id for id in range(1, 300, 3) if id % 7 != 0]

    paginator = Paginator(store)
    cursor, all_ids = 0, []
    while True:
        res = paginator.paginate(CursorPagination(cursor=cursor, page_size=8))

        # Every record is beyond the cursor
        assert all(id > cursor for id in ids(res.data))
        assert len(res.data) <= 8
        all_ids.extend(ids(res.data))

        if not res.has_next_page:
            break
        cursor = res.next_cursor

    assert all_ids == expected_ids


def test_cursor_page_size_settings():
    """ Test: page size defaults and limits apply to cursors as well """
    store = ListRecordStore(records(100))

    res = Paginator(store).paginate(CursorPagination(cursor=0))
    assert ids(res.data) == list(range(1, 51))
    assert res.next_cursor == 50

    res = Paginator(store, PaginationSettings(max_page_size=10)).paginate(CursorPagination(cursor=0, page_size=20))
    assert ids(res.data) == list(range(1, 11))

    with pytest.raises(exc.InvalidRequestError):
        Paginator(store).paginate(CursorPagination(cursor=0, page_size=0))


def test_cursor_bigint_bounds():
    """ Test: the peek row and the rewind must not push the numbers out of BIGINT range """
    store = RecordingStore(records(5))
    paginator = Paginator(store)

    # The largest cursor still works: nothing's beyond it
    res = paginator.paginate(CursorPagination(cursor=2 ** 63 - 1, page_size=2))
    assert res.data == []
    assert res.previous_cursor == 2 ** 63 - 1

    # The peek row would overflow the limit
    with pytest.raises(exc.InvalidRequestError, match='pageSize is out of range'):
        paginator.paginate(CursorPagination(cursor=0, page_size=2 ** 63 - 1))

    # Rewinding by two huge pages would overflow the lower bound
    with pytest.raises(exc.InvalidRequestError, match='cursor is out of range'):
        paginator.paginate(CursorPagination(cursor=0, page_size=2 ** 62, is_previous_page=True))

    # None of the failed requests have reached the store
    assert store.scans == [('after', 2 ** 63 - 1, 3)]


class RecordingStore(ListRecordStore):
    """ A store that remembers what it's been asked to do """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.scans = []
        self.counts = 0

    def scan_after(self, after, limit):
        self.scans.append(('after', after, limit))
        return super().scan_after(after, limit)

    def scan_offset(self, skip, limit):
        self.scans.append(('offset', skip, limit))
        return super().scan_offset(skip, limit)

    def count(self):
        self.counts += 1
        return super().count()


def records(n: int) -> list[dict]:
    return [{'id': id, 'name': f'user{id}'} for id in range(1, n + 1)]
