"""SatriaCb API adapter package.

Architectural role:
- Defines the HTTP boundary and the process entrypoint.
- Performs transport-level parsing, error mapping and static file serving.
- Delegates request work to `satriacb.core.engine`.
"""
