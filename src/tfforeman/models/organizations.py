from __future__ import annotations

from tfforeman.models.common import ForemanObject


class ForemanOrganization(ForemanObject):
    """A Foreman organization, typically mapping to a puppet branch."""
