"""Pydantic schemas for raw directory payloads.

Adapters validate each item returned by the remote service against these
models before normalizing it into a DirectoryObject. Unknown fields are
ignored; every field is optional because ``fields``/``$select`` trims the
payload.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GoogleName(BaseModel):
    fullName: Optional[str] = None
    givenName: Optional[str] = None
    familyName: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class GoogleUser(BaseModel):
    id: Optional[str] = None
    primaryEmail: Optional[str] = None
    name: Optional[GoogleName] = None

    model_config = ConfigDict(extra="ignore")


class GoogleGroup(BaseModel):
    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class GoogleMember(BaseModel):
    id: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    # USER, GROUP or CUSTOMER
    type: Optional[str] = None
    status: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class GraphDirectoryObject(BaseModel):
    id: Optional[str] = None
    displayName: Optional[str] = None
    mail: Optional[str] = None
    odata_type: Optional[str] = Field(default=None, alias="@odata.type")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
