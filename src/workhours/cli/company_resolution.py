"""CLI helpers for company resolution and error handling."""

from __future__ import annotations

import click
from workhours.cli.error_handling import handle_domain_error
from workhours.domain.company import CompanyService
from workhours.domain.entities import Company
from workhours.utils.company_resolver import resolve_company


def resolve_company_or_exit(
    ctx: click.Context, company_service: CompanyService, company: str
) -> Company:
    """Resolve company name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        company_id = resolve_company(company_service, company)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
    return company_service.require_company(company_id)
