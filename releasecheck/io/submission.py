# -*- coding: utf-8 -*-
import logging
from dataclasses import dataclass
from typing import Dict, Optional

import requests

from releasecheck.config import SubmissionConfig

logger = logging.getLogger("releasecheck.submission")


@dataclass(frozen=True)
class Submission:
    name: str
    category: str
    release_year: str
    release_date: str = ""
    link: str = ""
    description: str = ""


@dataclass(frozen=True)
class RelayResult:
    ok: bool
    error: Optional[str] = None


def build_issue(submission: Submission) -> Dict[str, str]:
    body = (
        "\n### New Technology Submission\n\n"
        f"- **Name:** {submission.name}\n"
        f"- **Category:** {submission.category}\n"
        f"- **Release Year:** {submission.release_year}\n"
        f"- **Release Date:** {submission.release_date or 'N/A'}\n"
        f"- **Documentation Link:** {submission.link or 'N/A'}\n\n"
        "### Notes\n"
        f"{submission.description or 'No description provided.'}\n\n"
        "---\n\n"
        "*Submitted via Release Check API*\n"
    )
    return {"title": f"[New Submission] {submission.name}", "body": body}


class SubmissionRelay:
    """Files new catalog entries as issues on the catalog repository."""

    def __init__(self, token: Optional[str] = None, issues_url: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        self.token = SubmissionConfig.GITHUB_TOKEN if token is None else token
        self.issues_url = issues_url or SubmissionConfig.ISSUES_URL
        self.session = session or requests.Session()

    def submit(self, submission: Submission) -> RelayResult:
        if not self.token:
            logger.warning("GITHUB_TOKEN is not configured. Skipping submission.")
            return RelayResult(ok=False, error="Submission relay is not configured")

        try:
            resp = self.session.post(
                self.issues_url,
                json=build_issue(submission),
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json",
                    "User-Agent": SubmissionConfig.USER_AGENT,
                },
                timeout=SubmissionConfig.TIMEOUT,
            )
        except requests.RequestException as e:
            logger.error(f"Submission relay request failed: {e}")
            return RelayResult(ok=False, error=str(e))

        if not resp.ok:
            logger.error(f"Submission relay rejected '{submission.name}' ({resp.status_code}): {resp.text}")
            return RelayResult(ok=False, error=resp.text)

        logger.info(f"Submission '{submission.name}' filed.")
        return RelayResult(ok=True)
