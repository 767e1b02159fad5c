"""Application environment types.

Defines the runtime environments the identity service distinguishes.
Settings use the environment to decide on the signing-key fallback,
reset-token exposure and error-detail disclosure.

Environments:
- DEVELOPMENT: Local development (fallback signing key, raw reset tokens in responses)
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Production deployment (SECRET_KEY required, details elided)
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
