# -*- coding: utf-8 -*-
from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from releasecheck.db.database import Base

class Bookmark(Base):
    __tablename__ = "bookmarks"

    id = Column(Integer, primary_key=True, index=True)
    technology_name = Column(String, unique=True, index=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

class Scan(Base):
    __tablename__ = "scans"

    id = Column(Integer, primary_key=True, index=True)
    text_hash = Column(String(64), index=True) # sha256 of the scanned JD

    # Counters
    requirements_found = Column(Integer, default=0)
    invalid_found = Column(Integer, default=0)
    corrections_made = Column(Integer, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Full JSON Backup
    full_json = Column(JSON, nullable=True)
