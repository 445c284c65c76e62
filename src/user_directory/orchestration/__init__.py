"""
Orchestration Layer - Query Coordination

This layer composes the extract and transformation layers for consumers.
- No business logic of its own beyond filtering and paging
- Composes fetch and normalize operations
"""
