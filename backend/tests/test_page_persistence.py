from schoolpages.application.pages import (
    add_page_component,
    create_custom_page,
    delete_custom_page,
    delete_page_component,
    load_component_types,
    load_custom_pages,
    load_page_by_path,
    update_custom_page,
    update_page_component,
)
from schoolpages.extensions import db
from schoolpages.models.page_component import PageComponent


def make_page(title="My Page", path=None, **kwargs):
    result = create_custom_page(title, path or title, **kwargs)
    assert result.ok, result.error
    return result.value


def test_create_normalizes_path_and_applies_default_config(app):
    result = create_custom_page("My Page", "My Page")

    assert result.ok
    assert result.error is None
    page = result.value
    assert page.path == "my-page"
    assert page.config == {"layout": "standard", "theme": "default"}
    assert page.id
    assert page.created_at is not None


def test_create_merges_partial_config_over_defaults(app):
    page = make_page(config={"theme": "dark"})

    assert page.config == {"layout": "standard", "theme": "dark"}


def test_create_collapses_whitespace_runs(app):
    page = make_page("Clubs", "After  School\tClubs")

    assert page.path == "after-school-clubs"


def test_create_rejects_unknown_layout(app):
    result = create_custom_page("P", "p", {"layout": "carousel"})

    assert not result.ok
    assert result.kind == "persistence_failure"


def test_create_with_duplicate_path_is_a_persistence_failure(app):
    make_page("First", "shared")

    result = create_custom_page("Second", "Shared")

    assert not result.ok
    assert result.value is None
    assert result.kind == "persistence_failure"
    assert result.error == "Failed to create page"


def test_load_custom_pages_orders_by_title(app):
    make_page("Zoology")
    make_page("Art")
    make_page("Music")

    result = load_custom_pages()

    assert result.ok
    assert [p.title for p in result.value] == ["Art", "Music", "Zoology"]


def test_load_custom_pages_empty_is_not_an_error(app):
    result = load_custom_pages()

    assert result.ok
    assert result.value == []


def test_load_custom_pages_for_a_class_includes_school_wide_pages(app):
    make_page("School news", class_id=None)
    make_page("7A homework", class_id="class-7a")
    make_page("7B homework", class_id="class-7b")

    result = load_custom_pages(class_id="class-7a")

    assert [p.title for p in result.value] == ["7A homework", "School news"]


def test_load_page_by_path_not_found(app):
    result = load_page_by_path("missing")

    assert not result.ok
    assert result.kind == "not_found"


def test_load_page_by_path_is_exact(app):
    make_page("Clubs", "clubs")

    assert not load_page_by_path("Clubs").ok
    assert not load_page_by_path("club").ok
    assert load_page_by_path("clubs").ok


def test_load_page_by_path_orders_components_by_position(app, type_ids):
    page = make_page()
    for position, text in [(2, "third"), (0, "first"), (1, "second")]:
        add_page_component(page.id, type_ids["paragraph"], position, {"text": text})

    result = load_page_by_path("my-page")

    assert result.ok
    components = result.value.components
    assert [c.config["text"] for c in components] == ["first", "second", "third"]
    assert [c.position for c in components] == [0, 1, 2]
    assert all(c.component_type.name == "paragraph" for c in components)


def test_duplicate_positions_are_accepted_and_read_deterministically(app, type_ids):
    page = make_page()
    a = add_page_component(page.id, type_ids["heading"], 0, {"text": "a"}).value
    b = add_page_component(page.id, type_ids["heading"], 0, {"text": "b"}).value
    assert a.position == b.position == 0

    first = [c.id for c in load_page_by_path("my-page").value.components]
    db.session.expire_all()
    second = [c.id for c in load_page_by_path("my-page").value.components]

    assert sorted(first) == sorted([a.id, b.id])
    assert first == second


def test_update_custom_page_is_a_partial_patch(app):
    page = make_page(config={"theme": "dark"})

    result = update_custom_page(page.id, {"title": "Renamed"})

    assert result.ok
    assert result.value.title == "Renamed"
    assert result.value.path == "my-page"
    assert result.value.config == {"layout": "standard", "theme": "dark"}


def test_update_custom_page_normalizes_new_path(app):
    page = make_page()

    result = update_custom_page(page.id, {"path": "New Home"})

    assert result.value.path == "new-home"


def test_update_missing_page_is_not_found(app):
    result = update_custom_page("nope", {"title": "x"})

    assert result.kind == "not_found"


def test_update_without_known_fields_fails(app):
    page = make_page()

    result = update_custom_page(page.id, {"colour": "red"})

    assert not result.ok
    assert result.kind == "persistence_failure"


def test_delete_page_then_load_by_path_is_not_found(app, type_ids):
    page_id = make_page().id
    add_page_component(page_id, type_ids["heading"], 0, {"text": "gone"})

    assert delete_custom_page(page_id).ok

    result = load_page_by_path("my-page")
    assert result.kind == "not_found"
    assert PageComponent.query.filter_by(page_id=page_id).count() == 0


def test_delete_missing_page_is_not_found(app):
    assert delete_custom_page("nope").kind == "not_found"


def test_load_component_types_orders_by_name(app):
    result = load_component_types()

    names = [t.name for t in result.value]
    assert names == sorted(names)
    assert len(names) == 12


def test_add_component_to_missing_page_fails(app, type_ids):
    result = add_page_component("no-such-page", type_ids["heading"], 0, {"text": "x"})

    assert not result.ok
    assert result.kind == "persistence_failure"
    assert result.error == "Failed to add component"


def test_update_and_delete_component(app, type_ids):
    page = make_page()
    component_id = add_page_component(page.id, type_ids["heading"], 0, {"text": "old"}).value.id

    updated = update_page_component(component_id, {"config": {"text": "new"}, "position": 5})
    assert updated.ok
    assert updated.value.config == {"text": "new"}
    assert updated.value.position == 5

    assert delete_page_component(component_id).ok
    assert delete_page_component(component_id).kind == "not_found"
    assert update_page_component(component_id, {"position": 1}).kind == "not_found"


def test_non_string_path_is_a_persistence_failure(app):
    result = create_custom_page("Title", 5)

    assert not result.ok
    assert result.kind == "persistence_failure"
    assert result.error == "Page path must be a string"


def test_update_with_non_string_path_or_title_fails(app):
    page = make_page()

    assert update_custom_page(page.id, {"path": 5}).kind == "persistence_failure"
    assert update_custom_page(page.id, {"title": ["x"]}).kind == "persistence_failure"
    assert load_page_by_path("my-page").ok


def test_update_component_rejects_non_integer_position(app, type_ids):
    page = make_page()
    component_id = add_page_component(page.id, type_ids["heading"], 3, {"text": "x"}).value.id

    for position in ("abc", True, 1.5):
        result = update_page_component(component_id, {"position": position})
        assert result.kind == "persistence_failure"

    assert db.session.get(PageComponent, component_id).position == 3
