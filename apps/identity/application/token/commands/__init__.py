from apps.identity.application.token.commands.logout import LogoutInteractor
from apps.identity.application.token.commands.refresh import RefreshSessionInteractor

__all__ = ["LogoutInteractor", "RefreshSessionInteractor"]
