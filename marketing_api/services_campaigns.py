"""Lookups and projections over the campaigns document."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Set, Tuple

from .errors import NotFoundError, ValidationError
from .utils.api_params import display_value, parse_ids, parse_int


REGION_FIELDS = (
    "region",
    "country",
    "impressions",
    "clicks",
    "conversions",
    "spend",
    "revenue",
    "ctr",
    "conversion_rate",
    "cpc",
    "cpa",
    "roas",
)

CREATIVE_IDS_EXAMPLE = {"creativeIds": [101, 102, 201]}


def _campaigns(document: Dict[str, Any]) -> List[Dict[str, Any]]:
    return document["campaigns"]


def parse_campaign_id(raw: Optional[str]) -> int:
    if not raw:
        raise ValidationError("Missing campaign ID", "campaignId query parameter is required")
    campaign_id = parse_int(raw)
    if campaign_id is None:
        raise ValidationError("Invalid campaign ID", "campaignId must be a valid number")
    return campaign_id


def find_campaign(document: Dict[str, Any], campaign_id: int) -> Dict[str, Any]:
    for campaign in _campaigns(document):
        if campaign.get("id") == campaign_id:
            return campaign
    raise NotFoundError("Campaign not found", "No campaign found with the provided ID")


def parse_region(raw: Optional[str]) -> str:
    if not raw:
        raise ValidationError("Missing region", "region query parameter is required")
    return raw


def region_rows(document: Dict[str, Any], region: str) -> List[Dict[str, Any]]:
    """One row per campaign that reports ``region``, in campaign order.

    Matching is exact and case-sensitive; only the first matching row of a
    campaign is used.
    """
    rows: List[Dict[str, Any]] = []
    for campaign in _campaigns(document):
        performance = campaign.get("regional_performance")
        if not performance:
            continue
        match = next((rp for rp in performance if rp.get("region") == region), None)
        if match is None:
            continue
        row = {"campaign": str(campaign.get("id")), "name": campaign.get("name")}
        row.update({field: match.get(field) for field in REGION_FIELDS})
        rows.append(row)

    if not rows:
        raise NotFoundError("No campaigns found", f"No campaigns found for region: {region}")
    return rows


def _creative_row(campaign: Dict[str, Any], creative: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "campaign_id": campaign.get("id"),
        "campaign_name": campaign.get("name"),
        "campaign_status": campaign.get("status"),
        "campaign_medium": campaign.get("medium"),
        "creative_id": creative.get("id"),
        "creative_name": creative.get("name"),
        "creative_format": creative.get("format"),
        "creative_url": creative.get("url"),
        "performance_score": creative.get("performance_score"),
        "is_primary": creative.get("is_primary"),
        "impressions": creative.get("impressions"),
        "clicks": creative.get("clicks"),
        "ctr": creative.get("ctr"),
        "a_b_test_variant": creative.get("a_b_test_variant") or None,
    }


def parse_creative_ids(payload: Any) -> Tuple[List[Any], Set[int]]:
    """Validate the request body.

    Returns the ``creativeIds`` list as sent and the set of its numeric entries;
    non-numeric entries are dropped unless nothing numeric is left.
    """
    creative_ids = payload.get("creativeIds") if isinstance(payload, dict) else None
    if not isinstance(creative_ids, list):
        raise ValidationError(
            "Missing or invalid creative IDs",
            "creativeIds must be provided as an array in the request body",
            example=CREATIVE_IDS_EXAMPLE,
        )
    if not creative_ids:
        raise ValidationError("Empty creative IDs array", "Please provide at least one creative ID")
    numeric_ids = set(parse_ids(creative_ids))
    if not numeric_ids:
        raise ValidationError("Invalid creative IDs", "All creative IDs must be valid numbers")
    return creative_ids, numeric_ids


def creative_report(
    document: Dict[str, Any],
    creative_ids: List[Any],
    numeric_ids: Set[int],
) -> Dict[str, Any]:
    rows: List[Dict[str, Any]] = []
    for campaign in _campaigns(document):
        for creative in campaign.get("creatives") or []:
            if creative.get("id") in numeric_ids:
                rows.append(_creative_row(campaign, creative))

    if not rows:
        joined = ", ".join(display_value(v) for v in creative_ids)
        raise NotFoundError("No creatives found", f"No creatives found for the provided IDs: {joined}")

    return {
        "message": "Creative performance data retrieved successfully",
        "requested_ids": creative_ids,
        "found_creatives": len(rows),
        "data": rows,
    }
