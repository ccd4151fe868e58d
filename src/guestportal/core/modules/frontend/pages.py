"""Reading and rendering of the built frontend files."""

import json
from pathlib import Path

LOGIN_PAGE = "index.html"
SUCCESS_PAGE = "success.html"
TITLE_PLACEHOLDER = "%VITE_PAGE_TITLE%"


def render_page(content: str, page_title: str, cache_token: str | None = None) -> str:
    """Substitute the page title and, if given, embed the cache token.

    The token is exposed to the login form script as window.cacheId, inserted
    right before the first closing body tag.
    """
    if cache_token:
        script = f"<script>window.cacheId = {json.dumps(cache_token)};</script></body>"
        content = content.replace("</body>", script, 1)
    return content.replace(TITLE_PLACEHOLDER, page_title)


def resolve_asset_path(frontend_path: str, request_path: str) -> Path | None:
    """Map a request path to a file inside the frontend directory.

    Returns None if the file does not exist or the path escapes the directory.
    """
    root = Path(frontend_path).resolve()
    candidate = (root / request_path.lstrip("/")).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


def read_page(frontend_path: str, file_name: str) -> str | None:
    """Read an HTML page from the frontend directory, None if it is missing."""
    path = resolve_asset_path(frontend_path, file_name)
    if path is None:
        return None
    return path.read_text(encoding="utf-8")
