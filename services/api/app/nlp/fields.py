from __future__ import annotations

from collections.abc import Iterable, Iterator

from packages.shared.schemas.command import FieldDefinitionV1, FieldTypeV1


class FieldDictionary:
    """Ordered, read-only collection of field definitions.

    Declaration order matters: the interpreter picks the first field whose terms
    appear in a command, so fields with longer phrases that contain another field's
    alias must be declared first.
    """

    def __init__(self, fields: Iterable[FieldDefinitionV1]) -> None:
        ordered = tuple(fields)
        by_id: dict[str, FieldDefinitionV1] = {}
        for field in ordered:
            if field.id in by_id:
                raise ValueError(f"Duplicate field id {field.id!r}")
            by_id[field.id] = field

        self._fields = ordered
        self._by_id = by_id

    def __iter__(self) -> Iterator[FieldDefinitionV1]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._by_id

    def get(self, field_id: str) -> FieldDefinitionV1 | None:
        return self._by_id.get(field_id)

    def ids(self) -> list[str]:
        return [f.id for f in self._fields]

    def display_name(self, field_id: str) -> str:
        field = self._by_id.get(field_id)
        return field.display_name if field else field_id


_POLICY_TYPE_SYNONYMS = {
    "home insurance": "home",
    "homeowners": "home",
    "homeowners insurance": "home",
    "house": "home",
    "house insurance": "home",
    "auto insurance": "auto",
    "car": "auto",
    "car insurance": "auto",
    "vehicle": "auto",
    "vehicle insurance": "auto",
    "life insurance": "life",
    "health insurance": "health",
    "medical": "health",
    "medical insurance": "health",
}

_COVERAGE_TYPE_SYNONYMS = {
    "full coverage": "comprehensive",
    "comprehensive coverage": "comprehensive",
    "collision coverage": "collision",
    "liability only": "liability",
    "liability coverage": "liability",
    "uninsured motorist": "uninsured",
    "uninsured motorists": "uninsured",
    "uninsured motorist coverage": "uninsured",
}


def default_field_dictionary() -> FieldDictionary:
    """The insurance form fields commands can update."""

    return FieldDictionary(
        [
            FieldDefinitionV1(
                id="firstName",
                display_name="First Name",
                aliases=("first name", "firstname", "given name"),
            ),
            FieldDefinitionV1(
                id="lastName",
                display_name="Last Name",
                aliases=("last name", "lastname", "surname", "family name"),
            ),
            FieldDefinitionV1(
                id="email",
                display_name="Email",
                aliases=("email", "email address", "e-mail"),
                type=FieldTypeV1.EMAIL,
            ),
            FieldDefinitionV1(
                id="phone",
                display_name="Phone",
                aliases=("phone", "phone number", "telephone", "mobile", "cell"),
                type=FieldTypeV1.TEL,
            ),
            FieldDefinitionV1(
                id="policyType",
                display_name="Policy Type",
                aliases=("policy type", "insurance type", "type of policy", "type of insurance"),
                type=FieldTypeV1.SELECT,
                options=("home", "auto", "life", "health"),
                synonyms=_POLICY_TYPE_SYNONYMS,
            ),
            FieldDefinitionV1(
                id="policyNumber",
                display_name="Policy Number",
                aliases=("policy number", "policy #", "policy id", "policy identifier"),
            ),
            FieldDefinitionV1(
                id="startDate",
                display_name="Start Date",
                aliases=("start date", "starting date", "policy start", "effective date"),
                type=FieldTypeV1.DATE,
            ),
            FieldDefinitionV1(
                id="endDate",
                display_name="End Date",
                aliases=("end date", "ending date", "policy end", "expiration date"),
                type=FieldTypeV1.DATE,
            ),
            # Before coverageAmount: "coverage type" contains the alias "coverage".
            FieldDefinitionV1(
                id="coverageType",
                display_name="Coverage Type",
                aliases=("coverage type", "type of coverage"),
                type=FieldTypeV1.SELECT,
                options=("comprehensive", "collision", "liability", "uninsured"),
                synonyms=_COVERAGE_TYPE_SYNONYMS,
            ),
            FieldDefinitionV1(
                id="coverageAmount",
                display_name="Coverage Amount",
                aliases=("coverage amount", "coverage", "coverage limit", "coverage value"),
                type=FieldTypeV1.CURRENCY,
            ),
            FieldDefinitionV1(
                id="deductible",
                display_name="Deductible",
                aliases=("deductible", "deductible amount"),
                type=FieldTypeV1.CURRENCY,
            ),
            FieldDefinitionV1(
                id="monthlyPremium",
                display_name="Monthly Premium",
                aliases=("monthly premium", "premium", "monthly payment", "payment"),
                type=FieldTypeV1.CURRENCY,
            ),
        ]
    )
