import pytest

from schoolpages import create_app
from schoolpages.cli import seed_component_types
from schoolpages.extensions import db
from schoolpages.models.component_type import ComponentType


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        seed_component_types()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def type_ids(app):
    """Component type name -> id."""
    return {t.name: t.id for t in ComponentType.query.all()}
