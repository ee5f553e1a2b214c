"""Gallery access policy: password protection and share links."""

import re

from picpeak_admin.parsers import to_boolean

DEFAULT_GALLERY_PREFIX = "/gallery"
PLACEHOLDER_LINK = "#"

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")
_HOST_RE = re.compile(r"^https?://[^/]+", re.IGNORECASE)
_SHARE_TOKEN_RE = re.compile(r"^[0-9a-fA-F]{32}$")


def normalize_require_password(value: object) -> bool:
    """Canonical require-password flag; unknown values stay protected."""
    return to_boolean(value, default=True)


def is_public(require_password: object) -> bool:
    """Return True when guests can open the gallery without a password."""
    return not normalize_require_password(require_password)


def resolve_share_link(
    raw_link: str | None, gallery_prefix: str = DEFAULT_GALLERY_PREFIX
) -> str:
    """Turn a stored share link into something a browser can open."""
    link = (raw_link or "").strip()
    if not link:
        return PLACEHOLDER_LINK
    if _SCHEME_RE.match(link) or link.startswith("/"):
        return link
    return f"{gallery_prefix.rstrip('/')}/{link}"


def extract_share_token(share_link: str | None) -> str | None:
    """Return the token part of a stored share link."""
    if not share_link:
        return None
    trimmed = str(share_link).strip()
    path = _HOST_RE.sub("", trimmed)
    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return None
    return segments[-1]


def is_potential_share_token(identifier: str | None) -> bool:
    """Return True if the identifier looks like a generated share token."""
    if not identifier:
        return False
    return bool(_SHARE_TOKEN_RE.match(identifier.strip()))


def build_share_path(
    slug: str | None,
    share_token: str,
    use_short: bool,
    gallery_prefix: str = DEFAULT_GALLERY_PREFIX,
) -> str:
    """Build the gallery path for a token, with the slug unless short URLs are on."""
    if not share_token:
        raise ValueError("share_token is required to build share path")
    prefix = gallery_prefix.rstrip("/")
    if use_short or not slug:
        return f"{prefix}/{share_token}"
    return f"{prefix}/{slug}/{share_token}"
