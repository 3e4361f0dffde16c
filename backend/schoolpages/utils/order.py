from schoolpages.extensions import db
from schoolpages.models.page_component import PageComponent

def next_position(page_id):
    """
    Position just after the last component on a page (0 for an empty page).
    """
    last = db.session.query(db.func.max(PageComponent.position))\
        .filter_by(page_id=page_id)\
        .scalar()

    return 0 if last is None else last + 1
