from sqlalchemy.orm import Session

from .. import models


def create_message(db: Session, sender_id: int, receiver_id: int, text: str) -> models.Message:
    db_obj = models.Message(sender_id=sender_id, receiver_id=receiver_id, message_text=text)
    db.add(db_obj)
    db.flush()
    return db_obj
