"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Database implementations (Prisma repositories)
- events/: Event notifier implementations (Redis pub/sub, logging)
"""
