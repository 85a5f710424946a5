from tfforeman.models.common import ForemanModel, ForemanObject, QueryResponse
from tfforeman.models.organizations import ForemanOrganization

__all__ = [
    "ForemanModel",
    "ForemanObject",
    "ForemanOrganization",
    "QueryResponse",
]
