from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Sequence

from heritage_browser.core.site import Site
from heritage_browser.core.year_parsing import parse_year_built
from heritage_browser.validation.errors import ValidationError, ValidationIssue


def validate_sites(sites: Sequence[Site]) -> None:
    """
    Check catalog-level invariants the filters rely on.

    Raises:
        ValidationError: on duplicate ids or sites without a name
    """
    issues: list[ValidationIssue] = []

    counts = Counter(s.id for s in sites)
    for site_id, n in counts.items():
        if n > 1:
            issues.append(
                ValidationIssue("SITE_DUPLICATE_ID", f"id '{site_id}' used by {n} sites.", site_id)
            )

    for site in sites:
        if not site.name.strip():
            issues.append(ValidationIssue("SITE_EMPTY_NAME", "Site has an empty name.", site.id))

    if issues:
        raise ValidationError(issues)


def unparsable_year_issues(sites: Iterable[Site]) -> list[ValidationIssue]:
    """
    Informational only: sites whose year_built cannot be placed on a timeline.
    They always pass the year filter, so these are never raised.
    """
    return [
        ValidationIssue(
            "SITE_YEAR_UNPARSABLE",
            f"year_built {site.year_built!r} is not a recognised year.",
            site.id,
        )
        for site in sites
        if site.year_built.strip() and parse_year_built(site.year_built) is None
    ]


def warn_on_invalid_sites(sites: Sequence[Site], logger: logging.Logger) -> None:
    """
    Validate sites and log warnings for problems.

    Warn-only: the app still runs, but issues show up in the logs right after load.
    """
    try:
        validate_sites(sites)
    except ValidationError as e:
        logger.warning(
            "Site catalog validation failed: %s",
            "; ".join(f"{issue.code}: {issue.message}" for issue in e.issues),
        )

    info = unparsable_year_issues(sites)
    if info:
        logger.info(
            "Sites with unparsable construction years",
            extra={"n_sites": len(info), "site_ids": [i.site_id for i in info]},
        )
