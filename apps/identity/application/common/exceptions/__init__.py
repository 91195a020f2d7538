"""Application Exceptions.

Only shared exceptions live here. Import area-specific ones directly:
  - apps.identity.application.oauth.exceptions.*
  - apps.identity.application.token.exceptions.*
  - apps.identity.application.users.exceptions.*
  - apps.identity.application.login.exceptions.*
"""

from apps.identity.application.common.exceptions.base import ApplicationError
from apps.identity.application.common.exceptions.security import RandomGenerationError

__all__ = [
    "ApplicationError",
    "RandomGenerationError",
]
