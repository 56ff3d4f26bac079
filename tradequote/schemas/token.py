"""
Pydantic schemas for session tokens
"""

from pydantic import BaseModel, ConfigDict, Field
import uuid

from tradequote.models.user import UserRole


class TokenClaims(BaseModel):
    """Verified identity carried by a session token"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id: uuid.UUID = Field(..., alias="userId")
    company_id: uuid.UUID = Field(..., alias="companyId")
    role: UserRole
