# -*- coding: utf-8 -*-
from typing import List

from sqlalchemy.orm import Session

from releasecheck.db.models import Bookmark


def list_bookmarks(db: Session) -> List[str]:
    rows = db.query(Bookmark).order_by(Bookmark.id).all()
    return [r.technology_name for r in rows]


def toggle_bookmark(db: Session, name: str) -> bool:
    """Adds the bookmark if missing, removes it otherwise. Returns the new state."""
    row = db.query(Bookmark).filter(Bookmark.technology_name == name).first()
    if row is not None:
        db.delete(row)
        db.commit()
        return False

    db.add(Bookmark(technology_name=name))
    db.commit()
    return True


def clear_bookmarks(db: Session) -> int:
    removed = db.query(Bookmark).delete()
    db.commit()
    return removed
