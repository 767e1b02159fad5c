"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses (inputs to write operations)
- dtos/: Results returned by services beyond plain entities
- services/: CredentialService and ProfileService

Services depend on domain protocols only and return Result types; they
never raise for expected failures.
"""
