"""
Transformation Layer - Pure, Deterministic Functions

This layer maps raw user records into enriched view-model records.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results
"""
