"""Test suite for the identity service.

Test structure follows the test pyramid:
- unit/: Unit tests - services, entities, config with mocked ports
- integration/: Integration tests - repositories and security adapters
  against in-memory SQLite
- api/: API endpoint tests - HTTP endpoints end-to-end via TestClient
"""
