from apps.identity.application.oauth.commands.authorize import OAuthAuthorizeInteractor
from apps.identity.application.oauth.commands.callback import OAuthCallbackInteractor
from apps.identity.application.oauth.commands.telegram_callback import (
    TelegramCallbackInteractor,
)

__all__ = [
    "OAuthAuthorizeInteractor",
    "OAuthCallbackInteractor",
    "TelegramCallbackInteractor",
]
