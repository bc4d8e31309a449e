"""Domain layer - Pure business logic.

Entities, value objects, enums, errors and protocols (ports) for the token
lifecycle. The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- entities/: Token and User records
- enums/: TokenPurpose, UserRole
- errors/: TokenError, TokenStoreError
- value_objects/: Password
- protocols/: Repository and service interfaces
"""
