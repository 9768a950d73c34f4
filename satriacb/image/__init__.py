"""Image generation package.

Scope:
    Text-to-image requests against the generative-language API. Uploaded image
    analysis lives in `satriacb.llm.service`; upload storage lives in
    `satriacb.api.multimodal`.
"""
