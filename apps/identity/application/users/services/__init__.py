from apps.identity.application.users.services.user_management_service import (
    ProvisioningResult,
    UserManagementService,
)

__all__ = ["ProvisioningResult", "UserManagementService"]
