from sqlalchemy.exc import OperationalError

from schoolpages.application.pages import (
    add_page_component,
    create_custom_page,
    load_page_by_path,
    reorder_components,
)
from schoolpages.extensions import db
from schoolpages.models.page_component import PageComponent


def page_with_three(type_ids):
    page = create_custom_page("Reorder", "reorder").value
    ids = [
        add_page_component(page.id, type_ids["paragraph"], position, {"text": f"c{position + 1}"}).value.id
        for position in range(3)
    ]
    return page.id, ids


def loaded_order():
    return [(c.id, c.position) for c in load_page_by_path("reorder").value.components]


def test_reorder_assigns_index_positions(app, type_ids):
    page_id, (c1, c2, c3) = page_with_three(type_ids)

    result = reorder_components(page_id, [c3, c1, c2])

    assert result.ok
    assert result.value == {"count": 3}
    assert loaded_order() == [(c3, 0), (c1, 1), (c2, 2)]


def test_reorder_of_missing_page_is_not_found(app):
    result = reorder_components("no-such-page", ["a"])

    assert result.kind == "not_found"


def test_reorder_empty_list_is_a_no_op(app, type_ids):
    page_id, ids = page_with_three(type_ids)

    assert reorder_components(page_id, []).ok
    assert [cid for cid, _ in loaded_order()] == ids


def test_partial_reorder_leaves_earlier_rows_moved(app, type_ids):
    page_id, (c1, c2, c3) = page_with_three(type_ids)
    other_page = create_custom_page("Other", "other").value
    foreign = add_page_component(other_page.id, type_ids["heading"], 7, {"text": "x"}).value.id

    # c3 moves to 0, then the foreign id stops the run before c1 is touched
    result = reorder_components(page_id, [c3, foreign, c1])

    assert not result.ok
    assert result.kind == "partial_reorder_failure"
    assert result.details == {"applied": 1, "total": 3}

    positions = dict(loaded_order())
    assert positions == {c1: 0, c2: 1, c3: 0}


def test_database_error_midway_keeps_earlier_rows(app, type_ids, monkeypatch):
    page_id, (c1, c2, c3) = page_with_three(type_ids)
    real_commit = db.session.commit
    commits = []

    def commit():
        commits.append(1)
        if len(commits) == 2:
            raise OperationalError("UPDATE page_components", {}, Exception("database is locked"))
        real_commit()

    monkeypatch.setattr(db.session, "commit", commit)

    result = reorder_components(page_id, [c3, c1, c2])
    monkeypatch.undo()

    assert result.kind == "partial_reorder_failure"
    assert result.details == {"applied": 1, "total": 3}
    assert dict(loaded_order()) == {c1: 0, c2: 1, c3: 0}


def test_failed_lookup_midway_is_a_partial_failure(app, type_ids, monkeypatch):
    page_id, (c1, c2, c3) = page_with_three(type_ids)

    class FlakyLookup:
        calls = 0

        def filter_by(self, **criteria):
            self.calls += 1
            if self.calls == 2:
                raise OperationalError("SELECT page_components", {}, Exception("connection lost"))
            return db.session.query(PageComponent).filter_by(**criteria)

    monkeypatch.setattr(PageComponent, "query", FlakyLookup())

    result = reorder_components(page_id, [c3, c1, c2])
    monkeypatch.undo()

    assert result.kind == "partial_reorder_failure"
    assert result.details == {"applied": 1, "total": 3}
    assert dict(loaded_order()) == {c1: 0, c2: 1, c3: 0}
