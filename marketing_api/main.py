from fastapi import APIRouter, Body, Depends, FastAPI, Query
from fastapi.responses import PlainTextResponse
from typing import Any, Optional

from marketing_api.config import AppConfig
from marketing_api.data_store import CAMPAIGNS, DataStore, get_store
from marketing_api.errors import register_error_handlers
from marketing_api.services_campaigns import (
    creative_report,
    find_campaign,
    parse_campaign_id,
    parse_creative_ids,
    parse_region,
    region_rows,
)
from marketing_api.services_credentials import OBFUSCATED, PLAINTEXT, authorize

router = APIRouter()


# ==================== Health ====================

@router.get("/", response_class=PlainTextResponse)
def hello():
    return "Hello World!"


# ==================== Campaign Data API ====================

@router.get("/full-data")
def full_data(store: DataStore = Depends(get_store)):
    """Return the campaigns document unfiltered."""
    return store.load(CAMPAIGNS)


@router.get("/campaign-data")
def campaign_data(
    campaign_id: Optional[str] = Query(default=None, alias="campaignId"),
    store: DataStore = Depends(get_store),
):
    """Return a single campaign, e.g. GET /campaign-data?campaignId=2"""
    cid = parse_campaign_id(campaign_id)
    return find_campaign(store.load(CAMPAIGNS), cid)


@router.get("/region-data")
def region_data(
    region: Optional[str] = Query(default=None),
    store: DataStore = Depends(get_store),
):
    """Per-campaign performance rows for one region, e.g. GET /region-data?region=Dubai"""
    wanted = parse_region(region)
    return region_rows(store.load(CAMPAIGNS), wanted)


@router.post("/creative-data")
def creative_data(
    payload: Any = Body(default=None),
    store: DataStore = Depends(get_store),
):
    """Creative performance by id. Body: {"creativeIds": [101, 102, 201]}"""
    creative_ids, numeric_ids = parse_creative_ids(payload)
    return creative_report(store.load(CAMPAIGNS), creative_ids, numeric_ids)


# ==================== Protected Data API ====================

@router.get("/simple-protected-data")
def simple_protected_data(
    username: Optional[str] = Query(default=None),
    password: Optional[str] = Query(default=None),
    store: DataStore = Depends(get_store),
):
    """Admin-only campaigns document, checked against plaintext passwords."""
    return authorize(store, PLAINTEXT, username, password)


@router.get("/encrypted-protected-data")
def encrypted_protected_data(
    username: Optional[str] = Query(default=None),
    password: Optional[str] = Query(default=None),
    store: DataStore = Depends(get_store),
):
    """Same as /simple-protected-data, comparing decoded obfuscated passwords."""
    return authorize(store, OBFUSCATED, username, password)


# ==================== App Factory ====================

def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    config = config or AppConfig.from_env()
    app = FastAPI(title="Marketing Data API", version="0.1.0")
    app.state.config = config
    app.state.store = DataStore(config)
    register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()
