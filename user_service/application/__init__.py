"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (create, update, delete)
- queries/   → Read operations (get, list, search, count)
- dto/       → Data Transfer Objects for the HTTP layer
- common/    → Command/Query base classes and the Result type

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Expected failures are returned as Err values, not raised
"""
