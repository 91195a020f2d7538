from apps.identity.application.oauth.services.login_service import OAuthLoginService
from apps.identity.application.oauth.services.oauth_flow_service import OAuthFlowService

__all__ = ["OAuthFlowService", "OAuthLoginService"]
