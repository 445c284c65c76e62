"""
Extract Layer - Pure I/O to the Users API

This layer handles all external data fetching with no business logic.
- No imports from transformation or orchestration layers
- Returns raw JSON payloads
- Handles timeouts, retries, error classification
"""
