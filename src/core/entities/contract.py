"""Contract snapshot and product category entities."""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ContractCategory(str, Enum):
    """Product line a contract belongs to."""

    RETIREMENT_PLAN = "PER"
    LIFE_INSURANCE = "ASSURANCE_VIE"
    HEALTH_MUTUAL = "MUTUELLE"
    PROVIDENT = "PREVOYANCE"
    BORROWER_INSURANCE = "ASSURANCE_EMPRUNTEUR"
    OTHER = "AUTRE"


class RenewalStatus(str, Enum):
    """Whether the contract is new, renews or replaces an existing one."""

    NEW = "nouveau"
    RENEWAL = "renouvellement"
    REPLACEMENT = "remplacement"
    UNSET = ""


class ContractSnapshot(BaseModel):
    """
    Read-only view of a contract at creation time.

    Flags are optional: ``None`` means the form did not provide the value,
    which the reminder rules treat as "not true". Field names accept the
    subscription form keys (``produit``, ``per_existant``...) as well.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    product: str = Field(validation_alias=AliasChoices("product", "produit"))
    has_existing_retirement_plan: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("has_existing_retirement_plan", "per_existant"),
    )
    has_existing_life_insurance: bool | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "has_existing_life_insurance", "assurance_vie_existante"
        ),
    )
    buyback_performed: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("buyback_performed", "rachat_effectue"),
    )
    renewal_status: RenewalStatus = Field(
        default=RenewalStatus.UNSET,
        validation_alias=AliasChoices(
            "renewal_status", "contrat_renouvellement_remplacement"
        ),
    )

    @field_validator("renewal_status", mode="before")
    @classmethod
    def none_is_unset(cls, v: object) -> object:
        return RenewalStatus.UNSET if v is None else v
