"""Multimodal preprocessing package for API adapters.

Architectural role:
- Stores uploaded images for the duration of one request.
- Applies size/type constraints before the image is forwarded.

Scope:
- Upload preprocessing only; no HTTP endpoint definitions.
"""
