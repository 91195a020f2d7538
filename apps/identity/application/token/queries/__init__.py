from apps.identity.application.token.queries.validate import ValidateSessionTokenQuery

__all__ = ["ValidateSessionTokenQuery"]
