"""
Embed links and share artifacts.

An embedded resume is served from

    /embed/<resumeId or "portable">?data=<token>&primaryColor=<hex>&density=<normal|compact>&showDownload=0

``data`` carries the whole resume as a share token (see document/codec.py);
without it the page looks the resume up by id in the key-value store. When
neither yields a resume the page shows its "not found" state.

The JavaScript embedding script builds the same URLs; build_embed_url() is
the server-side twin used by scripts and the builder's "share" panel.
"""

import json
import os
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import parse_qs, quote, urlencode, urljoin, urlsplit

from dotenv import load_dotenv

from cvembed.contexts.document.codec import decode_resume_from_url, encode_resume_for_url
from cvembed.contexts.sharing.logger import _log_debug
from cvembed.contexts.sharing.storage import KeyValueStore, load_embed_resume

load_dotenv()
DEFAULT_PUBLIC_BASE_URL = os.getenv("CVEMBED_PUBLIC_BASE_URL", "http://localhost:5173")

PORTABLE_RESUME_ID = "portable"
DEFAULT_PRIMARY_COLOR = "#111111"
EMBED_DENSITIES = ("normal", "compact")
IFRAME_HEIGHT = 1100

_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def normalize_base_url(value: str) -> str:
    """
    Clean up a user-entered base URL.

    Adds https:// when no scheme is given and reduces the value to its
    origin (scheme and host), dropping any path, query or credentials. Blank
    or unparsable input gives "".

    Examples:
        >>> normalize_base_url(" cv.example.com/app/ ")
        'https://cv.example.com'
        >>> normalize_base_url("http://localhost:5173///")
        'http://localhost:5173'
    """
    trimmed = value.strip()
    if not trimmed:
        return ""

    with_scheme = trimmed if _SCHEME_PATTERN.match(trimmed) else f"https://{trimmed}"
    try:
        parts = urlsplit(with_scheme)
    except ValueError:
        return ""

    host = parts.netloc.rpartition("@")[2].lower()
    if not host:
        return ""
    return f"{parts.scheme}://{host}"


def build_embed_url(
    base_url: str,
    resume_id: Optional[str] = None,
    resume_data: Optional[Dict[str, Any]] = None,
    primary_color: Optional[str] = None,
    density: Optional[str] = None,
    show_download: Optional[bool] = None,
) -> str:
    """
    Build an embed page URL.

    Args:
        base_url: Origin serving the embed page
        resume_id: Stored resume id (path segment); "portable" when omitted
        resume_data: Resume to inline as the ``data`` token
        primary_color: Theme color (e.g., "#1D4ED8")
        density: "normal" or "compact"
        show_download: Only an explicit False adds showDownload=0

    Returns:
        Absolute embed URL

    Raises:
        ValueError: If neither resume_id nor resume_data is given
    """
    if not resume_id and not resume_data:
        raise ValueError("An embed URL needs either resume_id or resume_data")

    path_id = quote(resume_id or PORTABLE_RESUME_ID, safe="")
    url = urljoin(base_url, f"/embed/{path_id}")

    params = {}
    if resume_data:
        params["data"] = encode_resume_for_url(resume_data)
    if primary_color:
        params["primaryColor"] = primary_color
    if density:
        params["density"] = density
    if show_download is False:
        params["showDownload"] = "0"

    return f"{url}?{urlencode(params)}" if params else url


@dataclass
class EmbedRequest:
    """
    Parsed embed page request.

    Attributes:
        resume_id: Path segment after /embed/ (may be "portable")
        data: Share token from the query, if any
        primary_color: Theme color, defaults to #111111
        density: "compact" or "normal"
        show_download: False only when showDownload=0
    """

    resume_id: Optional[str] = None
    data: Optional[str] = None
    primary_color: str = DEFAULT_PRIMARY_COLOR
    density: str = "normal"
    show_download: bool = True

    @classmethod
    def from_query(cls, resume_id: Optional[str], query: Any) -> "EmbedRequest":
        """
        Build a request from the path id and the query string or mapping.

        Args:
            resume_id: Path segment after /embed/
            query: Raw query string ("data=...&density=compact") or a
                mapping of parameter names to single values
        """
        if isinstance(query, str):
            params: Mapping[str, str] = {
                key: values[0] for key, values in parse_qs(query.lstrip("?")).items()
            }
        else:
            params = query or {}

        return cls(
            resume_id=resume_id or None,
            data=params.get("data") or None,
            primary_color=params.get("primaryColor") or DEFAULT_PRIMARY_COLOR,
            density="compact" if params.get("density") == "compact" else "normal",
            show_download=params.get("showDownload") != "0",
        )


def resolve_embed_resume(
    request: EmbedRequest, store: Optional[KeyValueStore] = None
) -> Optional[Dict[str, Any]]:
    """
    Find the resume an embed request refers to.

    The inline token wins when it decodes; otherwise the id is looked up
    in the store.

    Returns:
        Normalized resume, or None for the "not found" state
    """
    if request.data:
        decoded = decode_resume_from_url(request.data)
        if decoded is not None:
            return decoded
        _log_debug("Embed request carried an invalid data token; falling back to id lookup")

    if not request.resume_id or store is None:
        return None

    return load_embed_resume(store, request.resume_id)


@dataclass
class ShareArtifacts:
    """Copy-paste material offered by the builder's share panel."""

    portable_url: str
    iframe_snippet: str
    sdk_snippet: str


def build_share_artifacts(base_url: str, resume: Dict[str, Any]) -> ShareArtifacts:
    """
    Build the portable link, iframe tag and SDK snippet for a resume.

    Args:
        base_url: Public origin of the builder (blank falls back to
            CVEMBED_PUBLIC_BASE_URL)
        resume: Normalized resume

    Returns:
        ShareArtifacts
    """
    origin = normalize_base_url(base_url) or normalize_base_url(DEFAULT_PUBLIC_BASE_URL)
    portable_url = build_embed_url(origin, resume_data=resume)

    iframe_snippet = (
        f'<iframe src="{portable_url}" width="100%" height="{IFRAME_HEIGHT}" frameborder="0"></iframe>'
    )
    resume_json = json.dumps(resume, indent=2, ensure_ascii=False)
    sdk_snippet = "\n".join(
        [
            f'<script src="{origin}/sdk.js"></script>',
            '<div id="resume-container"></div>',
            "<script>",
            "  CVEmbed.render({",
            "    target: '#resume-container',",
            f"    baseUrl: '{origin}',",
            f"    resumeData: {resume_json},",
            "    options: { showDownload: false }",
            "  });",
            "</script>",
        ]
    )

    return ShareArtifacts(
        portable_url=portable_url,
        iframe_snippet=iframe_snippet,
        sdk_snippet=sdk_snippet,
    )
