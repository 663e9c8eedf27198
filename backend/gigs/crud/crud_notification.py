from sqlalchemy.orm import Session
from typing import Optional

from .. import models


def create_notification(
    db: Session,
    user_id: int,
    type: models.NotificationType,
    text: str,
    request_id: Optional[int] = None,
) -> models.Notification:
    db_obj = models.Notification(
        user_id=user_id,
        type=type.value,
        text=text,
        is_read=False,
        request_id=request_id,
    )
    db.add(db_obj)
    db.flush()
    return db_obj
