"""
Import path analysis.

Derives the RPM package name and forge-specific defaults (Source0 URL,
%setup arguments, summary) from a Go import path.
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Callable, Optional

import requests


logger = logging.getLogger(__name__)

FIXME_SOURCE = 'XXX: FIXME: Determine source distribution location'
FIXME_SUMMARY = 'XXX: FIXME: Determine a short summary'
FIXME_SETUP = '# XXX: FIXME: Add source tree name'
DEFAULT_SHORTCOMMIT = 7
GOOGLECODE_SHORTCOMMIT = 12

GITHUB_API = 'https://api.github.com'
GITHUB_TIMEOUT_SEC = 30

GITHUB_PATTERN = re.compile(r'^github\.com/(.*/([^/]*))$')
GOOGLECODE_PATTERN = re.compile(r'^code\.google\.com/p/([^/]*)')

SummaryFetcher = Callable[[str], Optional[str]]


@dataclass
class ForgeInfo:
    """Metadata known from the import path alone."""
    name: str
    summary: str = FIXME_SUMMARY
    source: str = FIXME_SOURCE
    setup: str = FIXME_SETUP
    shortcommit: int = DEFAULT_SHORTCOMMIT


def package_name(import_path: str) -> str:
    """
    RPM name for an import path.

    github.com/ActiveState/tail -> golang-github-ActiveState-tail
    """
    name = f"golang-{import_path}"
    name = re.sub(r'\.[^/]*', '', name, count=1)
    return name.replace('/', '-')


def fetch_github_summary(repo: str, session: Optional[requests.Session] = None) -> Optional[str]:
    """
    Fetch a repository description from the GitHub REST API.

    Args:
        repo: "<owner>/<name>"
        session: Optional requests session

    Returns:
        The description, or None if it is unset or cannot be fetched
    """
    headers = {'Accept': 'application/vnd.github+json'}
    token = os.environ.get('GITHUB_TOKEN')
    if token:
        headers['Authorization'] = f"Bearer {token}"

    url = f"{GITHUB_API}/repos/{repo}"
    http = session or requests
    try:
        response = http.get(url, headers=headers, timeout=GITHUB_TIMEOUT_SEC)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Could not fetch summary for {repo} from GitHub: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Unexpected GitHub API response for {repo}")
        return None

    description = data.get('description')
    if not description:
        logger.info(f"GitHub repository {repo} has no description")
        return None
    return description.strip()


def forge_defaults(
    import_path: str,
    summary_fetcher: Optional[SummaryFetcher] = None,
) -> ForgeInfo:
    """
    Forge-specific defaults for an import path.

    GitHub and Google Code paths get real Source0 and %setup values; anything
    else keeps the FIXME markers for the packager to fill in.
    """
    fetch = summary_fetcher or fetch_github_summary
    info = ForgeInfo(name=package_name(import_path))

    github = GITHUB_PATTERN.match(import_path)
    googlecode = GOOGLECODE_PATTERN.match(import_path)

    if github:
        repo, tree = github.group(1), github.group(2)
        summary = fetch(repo)
        if summary:
            info.summary = summary
        info.source = f"https://%{{import_path}}/archive/%{{commit}}/{tree}-%{{shortcommit}}.tar.gz"
        info.setup = f"-n {tree}-%{{commit}}"
    elif googlecode:
        project = googlecode.group(1)
        info.source = f"http://{project}.googlecode.com/archive/%{{commit}}.zip"
        info.setup = f"-n {project}-%{{shortcommit}}"
        info.shortcommit = GOOGLECODE_SHORTCOMMIT
        info.name = re.sub(r'^golang-code-p-', 'golang-googlecode-', info.name)
    else:
        logger.info(f"No forge defaults known for {import_path}")

    return info
