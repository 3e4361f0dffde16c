from schoolpages.cli import seed_component_types
from schoolpages.extensions import db
from schoolpages.models.component_type import ComponentType


def test_seed_is_idempotent(app):
    assert seed_component_types() == []
    assert ComponentType.query.count() == 12


def test_seed_command(app):
    ComponentType.query.filter_by(name="video").delete()
    db.session.commit()

    result = app.test_cli_runner().invoke(args=["seed-component-types"])

    assert "video" in result.output
    assert ComponentType.query.filter_by(name="video").count() == 1
