from __future__ import annotations

from src.admin_dashboard.admin_dashboard.core.enums import NewsEstado


def _add(repo, n: int, estado=NewsEstado.VIGENTE) -> int:
    return repo.create(url=f"https://news.example/{n}", title=f"Item {n}", publish_date="2025-03-01", estado=estado)


def test_created_item_is_listed(container):
    repo = container.news_repo
    news_id = _add(repo, 1)

    items = repo.list_all()

    assert [i.news_id for i in items] == [news_id]
    assert items[0].title == "Item 1"
    assert items[0].estado is NewsEstado.VIGENTE


def test_delete_removes_item_and_ignores_unknown_id(container):
    repo = container.news_repo
    keep = _add(repo, 1)
    gone = _add(repo, 2)

    assert repo.delete(gone) is True
    assert repo.delete(9999) is False
    assert [i.news_id for i in repo.list_all()] == [keep]


def test_toggle_flips_and_flips_back(container):
    repo = container.news_repo
    news_id = _add(repo, 1, estado=NewsEstado.VIGENTE)

    assert repo.toggle_estado(news_id) is True
    assert repo.get_by_id(news_id).estado is NewsEstado.NO_VIGENTE

    assert repo.toggle_estado(news_id) is True
    assert repo.get_by_id(news_id).estado is NewsEstado.VIGENTE


def test_toggle_unknown_id_reports_missing(container):
    assert container.news_repo.toggle_estado(404) is False


def test_update_and_set_estado(container):
    repo = container.news_repo
    news_id = _add(repo, 1)

    assert repo.update(news_id, url="https://x", title="New", publish_date="2025-04-01", estado=NewsEstado.VIGENTE)
    assert repo.set_estado(news_id, NewsEstado.NO_VIGENTE)

    item = repo.get_by_id(news_id)
    assert item.title == "New"
    assert item.estado is NewsEstado.NO_VIGENTE
    assert repo.update(12345, url="u", title="t", publish_date="d", estado=NewsEstado.VIGENTE) is False


def test_pages_are_ordered_and_report_has_more(container):
    repo = container.news_repo
    ids = [_add(repo, n) for n in range(12)]

    first = repo.list_page(page=1, limit=5)
    last = repo.list_page(page=3, limit=5)
    beyond = repo.list_page(page=4, limit=5)

    assert [i.news_id for i in first.items] == ids[:5]
    assert first.has_more is True
    assert [i.news_id for i in last.items] == ids[10:]
    assert last.has_more is False
    assert beyond.items == ()
