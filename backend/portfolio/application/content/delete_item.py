from portfolio.application.content.registry import EntitySpec
from portfolio.domain.exceptions import NotFoundError
from portfolio.extensions import db
from portfolio.utils.audit import log_action
from portfolio.utils.media import release_asset, release_assets
from portfolio.utils.transaction import transactional


def delete_item(spec: EntitySpec, item_id: str) -> None:
    """
    Delete a content item together with the child images it owns.

    Rows go first in one transaction (children are removed by the relationship
    cascade); remote images are released afterwards, children before the
    parent. A failed remote delete is queued, never reported as a failure of
    the request.
    """
    item = spec.model.query.filter_by(id=item_id).first()
    if not item:
        raise NotFoundError(f"{spec.label} with ID {item_id} not found.")

    image = spec.image
    public_id = getattr(item, image.public_id_column) if image else None

    children = list(getattr(item, spec.children)) if spec.children else []
    child_public_ids = [child.image_public_id for child in children if child.image_public_id]

    with transactional():
        if spec.before_delete:
            spec.before_delete(item)

        db.session.delete(item)

        log_action(
            action=f"{spec.entity_type}.delete",
            entity_type=spec.entity_type,
            entity_id=item_id,
            payload={"children": len(children)},
        )

    release_assets(child_public_ids, entity_type=spec.entity_type, entity_id=item_id)
    release_asset(public_id, entity_type=spec.entity_type, entity_id=item_id)
