# -*- coding: utf-8 -*-
import logging
from pathlib import Path
from typing import List

logger = logging.getLogger("releasecheck.io")

SUPPORTED_SUFFIXES = (".txt", ".pdf", ".docx")


def extract_text_from_pdf(path: Path) -> str:
    from pdfminer.high_level import extract_text
    try:
        return extract_text(str(path)) or ""
    except Exception as e:
        logger.warning(f"Could not read PDF '{path.name}': {e}")
        return ""


def extract_text_from_docx(path: Path) -> str:
    from docx import Document
    try:
        doc = Document(str(path))
        parts: List[str] = [p.text for p in doc.paragraphs if p.text]
        for tbl in doc.tables:
            for row in tbl.rows:
                for cell in row.cells:
                    txt = (cell.text or "").strip()
                    if txt:
                        parts.append(txt)
        return "\n".join(parts)
    except Exception as e:
        logger.warning(f"Could not read DOCX '{path.name}': {e}")
        return ""


def extract_text_from_txt(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        logger.warning(f"Could not read '{path.name}': {e}")
        return ""


def extract_job_text(file_path: str) -> str:
    p = Path(file_path)
    suf = p.suffix.lower()
    if suf == ".pdf":
        return extract_text_from_pdf(p)
    if suf == ".docx":
        return extract_text_from_docx(p)
    if suf == ".txt":
        return extract_text_from_txt(p)
    raise ValueError(f"Unsupported file type: {suf}. Only .pdf, .docx, and .txt are supported.")
