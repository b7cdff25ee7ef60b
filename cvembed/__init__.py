"""
CVEmbed - structured resume building, review and sharing

A small engine behind a resume builder: a canonical resume document, a
normalizer that accepts any older or partial shape, a validator and score,
and a URL-safe codec used for embeddable share links.

Architecture:
- Document Context: Data model, defaults, normalization, codec, editing
- Review Context: Structural and semantic validation, completeness score
- Sharing Context: Embed URLs, share artifacts, key-value persistence
"""

__version__ = "0.1.0"
