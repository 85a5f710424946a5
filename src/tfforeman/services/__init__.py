from tfforeman.services.organizations import OrganizationsService

__all__ = ["OrganizationsService"]
