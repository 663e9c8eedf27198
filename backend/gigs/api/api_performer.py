from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import crud, schemas
from ..database import get_db

router = APIRouter(tags=["performers"])


@router.get("/new")
def new_performers(db: Session = Depends(get_db)):
    """Performers who joined in the last ten days, newest first."""
    performers = crud.crud_performer.list_new_performers(db, days=10, limit=4)
    return {
        "profiles": [
            schemas.PerformerProfile.model_validate(p).model_dump(mode="json") for p in performers
        ]
    }
