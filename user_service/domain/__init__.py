"""
DOMAIN LAYER

This layer contains:
- Entities: Business objects with identity (User)
- Ports: Interfaces that infrastructure implements (UserRepository, UserEventNotifier)
- Exceptions: Failures that cross the repository port

RULES:
1. NO framework imports (no FastAPI, Prisma, Redis, Pydantic)
2. NO I/O operations
3. Only depends on Python stdlib
"""
