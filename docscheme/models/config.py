# =============================================================================
# Configuration Models Module
# =============================================================================
# Provides the models describing where a scheme reads from / writes to:
# - StoreTarget: validated host(s), port and resource path of one job
# - DocumentStoreSettings: environment-backed defaults for the document store
# =============================================================================

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "StoreTarget",
    "DocumentStoreSettings",
]


# =============================================================================
# Store Target (per job)
# =============================================================================

class StoreTarget(BaseModel):
    """
    Connection target published into the job settings before a split runs.

    Attributes:
        hosts: One or more store hosts (a comma-separated string is accepted)
        port: Store port (1-65535)
        resource: Target resource path, either "collection" or
                  "database/collection"
    """

    model_config = ConfigDict(frozen=True)

    hosts: List[str] = Field(..., min_length=1, description="Store host(s)")
    port: int = Field(..., ge=1, le=65535, description="Store port")
    resource: str = Field(..., description="Target resource path")

    @field_validator("hosts", mode="before")
    @classmethod
    def split_hosts(cls, v):
        """Accept "h1,h2" as well as a list; drop blank entries."""
        if isinstance(v, str):
            v = v.split(",")
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"hosts must be a string or list, got {type(v).__name__}")
        return [str(host).strip() for host in v if str(host).strip()]

    @field_validator("resource")
    @classmethod
    def validate_resource(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("resource cannot be empty")
        if v.startswith("/") or v.endswith("/"):
            raise ValueError(f"resource cannot start or end with '/': '{v}'")
        if v.count("/") > 1:
            raise ValueError(
                f"resource must be 'collection' or 'database/collection', got '{v}'"
            )
        return v

    @property
    def database(self) -> Optional[str]:
        """Database part of the resource, if the resource names one."""
        if "/" in self.resource:
            return self.resource.split("/", 1)[0]
        return None

    @property
    def collection(self) -> str:
        return self.resource.rsplit("/", 1)[-1]

    @property
    def nodes(self) -> str:
        """Hosts joined back into the comma-separated settings form."""
        return ",".join(self.hosts)


# =============================================================================
# Document Store Settings (environment)
# =============================================================================

class DocumentStoreSettings(BaseSettings):
    """
    Environment defaults for the document store.

    Used by the split ops when their run config names no host or port.

    Maps environment variables:
    - DOCSTORE_HOST → host
    - DOCSTORE_PORT → port

    Attributes:
        host: Store host(s), comma-separated (default: "localhost")
        port: Store port (default: 27017)
    """

    host: str = Field("localhost", validation_alias="DOCSTORE_HOST", description="Store host(s)")
    port: int = Field(27017, validation_alias="DOCSTORE_PORT", description="Store port")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated env vars from shared .env files
    )
