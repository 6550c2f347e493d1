"""Utility for resolving company names to IDs."""

from workhours.domain.company import CompanyService
from workhours.domain.errors import NotFoundError, ValidationError


def resolve_company(company_service: CompanyService, company: str) -> str:
    """Resolve company name or ID to company ID.

    Exact IDs win, then exact names (case-insensitive), then unique ID
    prefixes such as the short IDs shown by ``company list``.

    Args:
        company_service: CompanyService instance
        company: Company name, ID or ID prefix

    Returns:
        Company ID

    Raises:
        NotFoundError: If no company matches
        ValidationError: If the name or prefix matches several companies
    """
    companies = company_service.list_companies()
    wanted = company.strip()

    for comp in companies:
        if comp.id == wanted:
            return comp.id

    by_name = [c for c in companies if c.name.lower() == wanted.lower()]
    if len(by_name) == 1:
        return by_name[0].id
    if len(by_name) > 1:
        raise ValidationError(
            f"Company name '{company}' is ambiguous; use the company ID instead"
        )

    by_prefix = [c for c in companies if wanted and c.id.startswith(wanted.lower())]
    if len(by_prefix) == 1:
        return by_prefix[0].id
    if len(by_prefix) > 1:
        raise ValidationError(f"Company ID prefix '{company}' is ambiguous")

    raise NotFoundError(f"Company '{company}' not found")
