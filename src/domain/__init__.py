"""Domain layer - Pure business logic.

This layer contains the account and address entities, value objects, the
protocols (ports) adapters implement, and the exceptions adapters raise
across those ports. It has NO framework or infrastructure dependencies.

Structure:
- entities/: Account, Address
- value_objects/: Email normalization and validation
- protocols/: Repository and service interfaces
- errors/: StorageError, EmailAlreadyStoredError, CorruptHashError
"""
