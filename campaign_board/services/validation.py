"""
Validation rules for submitted projects.

Payloads arrive from untrusted callers. They are checked against the field
constraints in one pass so every violation is reported together.
"""
import math
import re
from typing import Any, Dict, List, Optional

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from campaign_board.domains import FieldViolation, ProjectCategory, ViolationCode

DEFAULT_CAMPAIGN_DOMAIN = "gofundme.com"

# Keys used by older clients
FIELD_ALIASES = {
    "gofundme_link": "campaign_link",
}

ERROR_CODES = {
    "missing": ViolationCode.REQUIRED,
    "string_too_short": ViolationCode.TOO_SHORT,
    "string_too_long": ViolationCode.TOO_LONG,
    "greater_than_equal": ViolationCode.OUT_OF_RANGE,
    "less_than_equal": ViolationCode.OUT_OF_RANGE,
    # EmailStr reports syntax errors as value_error
    "value_error": ViolationCode.INVALID_EMAIL,
    "url_parsing": ViolationCode.INVALID_URL,
    "url_scheme": ViolationCode.INVALID_URL,
    "url_syntax_violation": ViolationCode.INVALID_URL,
    "url_too_long": ViolationCode.INVALID_URL,
    "invalid_campaign_link": ViolationCode.INVALID_CAMPAIGN_LINK,
    "invalid_category": ViolationCode.INVALID_CATEGORY,
}


def _snake_case(key: str) -> str:
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", key).lower()


class ProjectSubmission(BaseModel):
    """Normalized project draft produced from a valid payload."""
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=10, max_length=100)
    description: str = Field(..., min_length=50, max_length=2000)
    campaign_link: AnyHttpUrl
    image_url: Optional[AnyHttpUrl] = None
    category: ProjectCategory
    goal_amount: float = Field(..., ge=1, le=1_000_000)
    contact_name: str = Field(..., min_length=2, max_length=100)
    contact_email: EmailStr
    contact_phone: Optional[str] = None

    @field_validator("image_url", "contact_phone", mode="before")
    @classmethod
    def _blank_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value

    @field_validator("category", mode="before")
    @classmethod
    def _known_category(cls, value: Any) -> ProjectCategory:
        candidate = value.strip() if isinstance(value, str) else value
        try:
            return ProjectCategory(candidate)
        except ValueError:
            raise PydanticCustomError(
                "invalid_category",
                "Category must be one of: {allowed}",
                {"allowed": ", ".join(c.value for c in ProjectCategory)},
            )

    @field_validator("goal_amount", mode="before")
    @classmethod
    def _numeric_amount(cls, value: Any) -> float:
        # Anything that is not a finite number counts as 0 and fails the bound.
        if isinstance(value, bool):
            return 0.0
        try:
            amount = float(value)
        except (TypeError, ValueError):
            return 0.0
        return amount if math.isfinite(amount) else 0.0

    @field_validator("campaign_link")
    @classmethod
    def _campaign_host(cls, value: AnyHttpUrl, info: ValidationInfo) -> AnyHttpUrl:
        domain = (info.context or {}).get("campaign_domain", DEFAULT_CAMPAIGN_DOMAIN)
        if domain.lower() not in (value.host or "").lower():
            raise PydanticCustomError(
                "invalid_campaign_link",
                "Must be a valid link to a {domain} campaign",
                {"domain": domain},
            )
        return value

    @field_validator("campaign_link", mode="before")
    @classmethod
    def _trimmed_link(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class ValidationResult(BaseModel):
    """Outcome of validating a payload: a draft or a list of violations."""
    draft: Optional[ProjectSubmission] = None
    violations: List[FieldViolation] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.draft is not None and not self.violations


def normalize_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Map camelCase and legacy keys onto the snake_case field names."""
    normalized: Dict[str, Any] = {}
    for key, value in payload.items():
        name = _snake_case(str(key))
        name = FIELD_ALIASES.get(name, name)
        normalized.setdefault(name, value)
    return normalized


def _to_violation(error: Dict[str, Any]) -> FieldViolation:
    field = str(error["loc"][0]) if error.get("loc") else "payload"
    code = ERROR_CODES.get(error["type"], ViolationCode.INVALID_TYPE)
    if error.get("input") is None and code == ViolationCode.INVALID_TYPE:
        code = ViolationCode.REQUIRED
    if field == "campaign_link" and code == ViolationCode.INVALID_URL:
        code = ViolationCode.INVALID_CAMPAIGN_LINK
    return FieldViolation(field=field, code=code, message=error["msg"])


def validate_submission(
    payload: Any, campaign_domain: str = DEFAULT_CAMPAIGN_DOMAIN
) -> ValidationResult:
    """Check a raw submission payload against the project field rules.

    Args:
        payload: Raw payload as received from the caller
        campaign_domain: Domain every campaign link must be hosted on

    Returns:
        ValidationResult holding either the normalized draft or all violations
    """
    if not isinstance(payload, dict):
        return ValidationResult(violations=[
            FieldViolation(
                field="payload",
                code=ViolationCode.INVALID_TYPE,
                message="Submission must be an object of fields",
            )
        ])

    try:
        draft = ProjectSubmission.model_validate(
            normalize_payload(payload), context={"campaign_domain": campaign_domain}
        )
    except ValidationError as e:
        return ValidationResult(violations=[_to_violation(error) for error in e.errors()])

    return ValidationResult(draft=draft)
