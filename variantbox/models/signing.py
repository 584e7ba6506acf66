"""Signing identity models.

Identities describe where signing credentials live. They never contain key
material or passwords; passwords are referenced by environment variable name.
"""

from typing import Any

from pydantic import Field, field_validator, model_validator

from .base import VariantboxBaseModel


DEBUG_IDENTITY_NAME = "debug"

_INLINE_SECRET_KEYS = {"storePassword", "store_password", "keyPassword", "key_password"}


class SigningIdentityRef(VariantboxBaseModel):
    """Named pointer into a signing identity registry."""

    name: str = Field(min_length=1, description="Name of the registry entry")

    @model_validator(mode="before")
    @classmethod
    def from_name(cls, data: Any) -> Any:
        """Allow a bare identity name in place of a mapping."""
        if isinstance(data, str):
            return {"name": data}
        return data

    def __str__(self) -> str:
        return self.name


class SigningIdentity(VariantboxBaseModel):
    """Location of the credentials for one signing identity."""

    name: str = Field(min_length=1)
    store_file: str = Field(min_length=1, description="Keystore location")
    key_alias: str = Field(min_length=1)
    store_password_env: str | None = Field(
        default=None, description="Environment variable holding the store password"
    )
    key_password_env: str | None = Field(
        default=None, description="Environment variable holding the key password"
    )
    development: bool = Field(
        default=False, description="Identity is only meant for local development"
    )

    @model_validator(mode="before")
    @classmethod
    def reject_inline_secrets(cls, data: Any) -> Any:
        """Refuse identities that embed passwords instead of referencing them."""
        if isinstance(data, dict):
            inline = sorted(_INLINE_SECRET_KEYS.intersection(data))
            if inline:
                raise ValueError(
                    f"inline credentials are not allowed ({', '.join(inline)}); "
                    "reference an environment variable with storePasswordEnv "
                    "or keyPasswordEnv instead"
                )
        return data


DEBUG_SIGNING_IDENTITY = SigningIdentity(
    name=DEBUG_IDENTITY_NAME,
    store_file="~/.android/debug.keystore",
    key_alias="androiddebugkey",
    development=True,
)

DEBUG_SIGNING_REF = SigningIdentityRef(name=DEBUG_IDENTITY_NAME)


class SigningIdentityRegistry(VariantboxBaseModel):
    """Mapping from identity name to signing credentials location."""

    identities: dict[str, SigningIdentity] = Field(default_factory=dict)

    @field_validator("identities", mode="before")
    @classmethod
    def name_identities_from_keys(cls, v: Any) -> Any:
        """Fill in each identity's name from its mapping key."""
        if not isinstance(v, dict):
            return v
        named: dict[str, Any] = {}
        for key, entry in v.items():
            if isinstance(entry, dict) and "name" not in entry:
                entry = {**entry, "name": key}
            named[key] = entry
        return named

    @model_validator(mode="after")
    def check_keys_match_names(self) -> "SigningIdentityRegistry":
        for key, identity in self.identities.items():
            if key != identity.name:
                raise ValueError(
                    f"identity registered as '{key}' is named '{identity.name}'"
                )
        return self

    @classmethod
    def standard(cls) -> "SigningIdentityRegistry":
        """Registry holding only the Android debug identity."""
        return cls(identities={DEBUG_IDENTITY_NAME: DEBUG_SIGNING_IDENTITY})

    def get(self, name: str) -> SigningIdentity | None:
        return self.identities.get(name)

    def names(self) -> list[str]:
        return sorted(self.identities)

    def with_identity(self, identity: SigningIdentity) -> "SigningIdentityRegistry":
        """Return a new registry with ``identity`` added or replaced."""
        return SigningIdentityRegistry(
            identities={**self.identities, identity.name: identity}
        )

    def __contains__(self, name: object) -> bool:
        return name in self.identities

    def __len__(self) -> int:
        return len(self.identities)
