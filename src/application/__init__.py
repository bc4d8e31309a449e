"""Application layer - Use cases and orchestration.

Structure:
- services/: TokenEngine (token lifecycle state machine)
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)

The application layer orchestrates domain objects through injected
protocols; it never imports infrastructure.
"""
