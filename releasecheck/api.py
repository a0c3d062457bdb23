# -*- coding: utf-8 -*-
import hashlib
import logging
import os
import shutil
import tempfile
import time
from pathlib import Path
from typing import List, Optional

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from releasecheck.catalog.catalog_loader import Technology, fetch_catalog, load_catalog
from releasecheck.config import CatalogConfig, SwaggerConfig
from releasecheck.core.quick_check import check_claim
from releasecheck.core.normalize import current_year
from releasecheck.db.bookmarks import clear_bookmarks, list_bookmarks, toggle_bookmark
from releasecheck.db.database import get_db, init_db
from releasecheck.db.models import Scan
from releasecheck.io.extractors import SUPPORTED_SUFFIXES, extract_job_text
from releasecheck.io.submission import Submission, SubmissionRelay
from releasecheck.pipeline.pipeline import scan_job_description

logger = logging.getLogger("releasecheck.api")

# Init DB Tables on Import (or use startup event)
init_db()

app = FastAPI(
    title=SwaggerConfig.TITLE,
    description=SwaggerConfig.DESCRIPTION,
    version=SwaggerConfig.VERSION
)

_catalog_cache: List[Technology] = []
_catalog_failed_at: Optional[float] = None


def get_catalog() -> List[Technology]:
    """
    Loads the catalog once: from CatalogConfig.PATH if set, otherwise upstream.
    An empty upstream result is not cached; refetching waits CatalogConfig.RETRY_INTERVAL.
    """
    global _catalog_cache, _catalog_failed_at
    if _catalog_cache:
        return _catalog_cache

    if CatalogConfig.PATH:
        _catalog_cache = load_catalog(CatalogConfig.PATH)
        return _catalog_cache

    if _catalog_failed_at is not None and time.monotonic() - _catalog_failed_at < CatalogConfig.RETRY_INTERVAL:
        raise HTTPException(status_code=503, detail="Technology catalog is unavailable")

    _catalog_cache = fetch_catalog(timeout=CatalogConfig.FETCH_TIMEOUT)
    if not _catalog_cache:
        _catalog_failed_at = time.monotonic()
        logger.error("Technology catalog is empty; upstream sources unavailable.")
        raise HTTPException(status_code=503, detail="Technology catalog is unavailable")

    _catalog_failed_at = None
    return _catalog_cache


def get_relay() -> SubmissionRelay:
    return SubmissionRelay()


class ScanRequest(BaseModel):
    text: str
    current_year: Optional[int] = None


class SubmissionRequest(BaseModel):
    name: str
    category: str
    releaseYear: str
    releaseDate: str = ""
    link: str = ""
    description: str = ""


def _record_scan(db: Session, text: str, report: dict) -> None:
    summary = report["summary"]
    try:
        db.add(Scan(
            text_hash=hashlib.sha256(text.encode("utf-8")).hexdigest(),
            requirements_found=summary["requirements_found"],
            invalid_found=summary["invalid_requirements"],
            corrections_made=summary["corrections_made"],
            full_json=report,
        ))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"DB Insert Error (Scan): {e}")


@app.post("/jd/scan", summary="Scan a job description for impossible experience claims")
async def scan_jd(req: ScanRequest, catalog: List[Technology] = Depends(get_catalog),
                  db: Session = Depends(get_db)):
    """
    Finds technology mentions with years-of-experience claims, flags the ones
    older than the technology itself and returns a corrected job description.
    """
    if not req.text.strip():
        raise HTTPException(status_code=400, detail="Job description text is empty")

    year = current_year() if req.current_year is None else req.current_year
    report = scan_job_description(req.text, catalog, current_year=year)
    _record_scan(db, req.text, report)
    return report


@app.post("/jd/upload", summary="Upload a job description file and scan it")
async def upload_jd(file: UploadFile = File(...), catalog: List[Technology] = Depends(get_catalog),
                    db: Session = Depends(get_db)):
    """
    Accepts .txt, .pdf or .docx. The file is only kept for the duration of the scan.
    """
    filename = file.filename
    if not filename:
        raise HTTPException(status_code=400, detail="Filename is missing")

    ext = Path(filename).suffix.lower()
    if ext not in SUPPORTED_SUFFIXES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid file type '{ext}'. Allowed types: {', '.join(SUPPORTED_SUFFIXES)}"
        )

    with tempfile.NamedTemporaryFile(suffix=ext, delete=False) as tmp:
        shutil.copyfileobj(file.file, tmp)
        tmp_path = tmp.name

    try:
        text = extract_job_text(tmp_path)
    finally:
        os.unlink(tmp_path)

    if not text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from the file")

    report = scan_job_description(text, catalog, current_year=current_year())
    report["job_file"] = filename
    _record_scan(db, text, report)
    return report


@app.get("/technologies", summary="Search technologies or check a '<tech> <years>' claim")
async def technologies(q: str = "", year: Optional[int] = None,
                       catalog: List[Technology] = Depends(get_catalog)):
    result = check_claim(q, catalog, current_year() if year is None else year)
    return {
        "query": q,
        "validation": result.validation.to_dict() if result.validation else None,
        "technologies": [t.to_dict() for t in result.matches],
    }


@app.get("/bookmarks", summary="List bookmarked technologies")
async def get_bookmarks(db: Session = Depends(get_db)):
    return {"bookmarks": list_bookmarks(db)}


@app.post("/bookmarks/{name}", summary="Toggle a technology bookmark")
async def post_bookmark(name: str, db: Session = Depends(get_db)):
    return {"name": name, "bookmarked": toggle_bookmark(db, name)}


@app.delete("/bookmarks", summary="Remove all bookmarks")
async def delete_bookmarks(db: Session = Depends(get_db)):
    return {"removed": clear_bookmarks(db)}


@app.post("/submissions", summary="Submit a new technology for the catalog")
async def submit_technology(req: SubmissionRequest, relay: SubmissionRelay = Depends(get_relay)):
    result = relay.submit(Submission(
        name=req.name,
        category=req.category,
        release_year=req.releaseYear,
        release_date=req.releaseDate,
        link=req.link,
        description=req.description,
    ))
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error or "Submission failed")
    return {"ok": True}
