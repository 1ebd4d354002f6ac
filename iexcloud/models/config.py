"""Configuration models for the IEX Cloud client."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


BASE_URL_TEMPLATE = "https://{env}.iexapis.com/stable/"


class Environment(str, Enum):
    """IEX Cloud host selector."""

    PRODUCTION = "cloud"
    SANDBOX = "sandbox"

    @property
    def base_url(self) -> str:
        return BASE_URL_TEMPLATE.format(env=self.value)


class IexCloudConfig(BaseModel):
    """IEX Cloud client configuration."""

    token: str = Field(min_length=1, description="API token sent as the 'token' query parameter")
    environment: Environment = Field(default=Environment.PRODUCTION)
    timeout: float = Field(default=30.0, ge=1.0, description="Default request timeout in seconds")
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def base_url(self) -> str:
        return self.environment.base_url

    @classmethod
    def from_yaml(cls, data: dict[str, Any]) -> "IexCloudConfig":
        """Create config from parsed YAML data."""
        config_data = {
            "token": data.get("token"),
            "environment": data.get("environment"),
            "timeout": data.get("timeout"),
            "headers": data.get("headers"),
        }

        # Filter out None values so defaults apply
        config_data = {k: v for k, v in config_data.items() if v is not None}

        return cls(**config_data)

    def get_safe_dict(self) -> dict[str, Any]:
        """Get config dict safe for logging/display (token masked)."""
        data = self.model_dump(mode="json")
        data["token"] = mask_token(self.token)
        return data


def mask_token(token: str) -> str:
    """Mask all but the last four characters of a token."""
    if len(token) <= 4:
        return "****"
    return "*" * (len(token) - 4) + token[-4:]
