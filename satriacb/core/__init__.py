"""Core orchestration package.

Composition:
    - `engine`: per-endpoint request orchestration.
    - `settings`: process configuration object.
    - `errors`: error taxonomy mapped to HTTP statuses by the API layer.

Package import itself is side-effect free.
"""
