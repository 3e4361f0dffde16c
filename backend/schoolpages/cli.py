import click
from flask.cli import with_appcontext
from schoolpages.extensions import db
from schoolpages.domain.catalog import COMPONENT_TYPE_CATALOG
from schoolpages.models.component_type import ComponentType
from schoolpages.utils.transaction import transactional


def seed_component_types():
    """
    Insert catalog entries that are missing. Existing rows are left as they
    are, so running it twice is harmless. Returns the names added.
    """
    existing = {name for (name,) in db.session.query(ComponentType.name).all()}
    added = []

    with transactional():
        for name, description, icon in COMPONENT_TYPE_CATALOG:
            if name in existing:
                continue
            component_type = ComponentType()
            component_type.name = name
            component_type.description = description
            component_type.icon = icon
            db.session.add(component_type)
            added.append(name)

    return added


@click.command("seed-component-types")
@with_appcontext
def seed_component_types_command():
    """Seed the component type catalog."""
    added = seed_component_types()
    if added:
        click.echo(f"Added component types: {', '.join(added)}")
    else:
        click.echo("Component types already seeded")
