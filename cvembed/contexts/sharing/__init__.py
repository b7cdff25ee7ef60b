"""
Sharing Context

Responsibilities:
- Builds embed URLs and share artifacts (portable link, iframe, SDK snippet)
- Resolves embed requests to resumes (inline token or stored id)
- Persists drafts and published resumes through a key-value store

Owns: Embed URL shape, storage keys
Never: Renders resumes
"""

from cvembed.contexts.sharing.embed import (
    EmbedRequest,
    ShareArtifacts,
    build_embed_url,
    build_share_artifacts,
    normalize_base_url,
    resolve_embed_resume,
)
from cvembed.contexts.sharing.storage import (
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    load_active_embed_id,
    load_draft,
    load_embed_resume,
    save_draft,
    save_embed_resume,
)

__all__ = [
    "EmbedRequest",
    "ShareArtifacts",
    "build_embed_url",
    "build_share_artifacts",
    "normalize_base_url",
    "resolve_embed_resume",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "load_active_embed_id",
    "load_draft",
    "load_embed_resume",
    "save_draft",
    "save_embed_resume",
]
