"""FastAPI server exposing outfit recommendation endpoints."""

from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from models.outfit import OutfitCriteria, RecommendedOutfit
from models.taxonomy import validate_season
from models.wardrobe_item import from_raw_metadata
from models.weather import WeatherCondition
from stylist_app.app import NoWardrobeItemsError, StylistApp

NO_ITEMS_MESSAGE = "No wardrobe items found. Add some items to your wardrobe first."


class WeatherPayload(BaseModel):
    type: str
    temperature: int
    precipitation: int = Field(..., ge=0, le=100)


class CriteriaRequest(BaseModel):
    """Request payload for criteria-driven recommendations."""

    model_config = ConfigDict(populate_by_name=True)

    occasion: str | None = None
    season: str | None = None
    weather: WeatherPayload | None = None
    style_preference: List[str] = Field(default_factory=list, alias="stylePreference")
    color_scheme: List[str] = Field(default_factory=list, alias="colorScheme")


class WardrobeRequest(BaseModel):
    """Full replacement of a user's wardrobe."""

    items: List[Dict[str, Any]]


def _split_csv(value: str | None) -> List[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _season_or_422(season: str | None) -> str | None:
    if not season:
        return None
    try:
        return validate_season(season)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _to_criteria(request: CriteriaRequest) -> OutfitCriteria:
    weather = None
    if request.weather:
        try:
            weather = WeatherCondition(
                type=request.weather.type,
                temperature=request.weather.temperature,
                precipitation_chance=request.weather.precipitation,
            )
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
    return OutfitCriteria(
        occasion=request.occasion,
        season=_season_or_422(request.season),
        weather=weather,
        style_preference=request.style_preference,
        color_scheme=request.color_scheme,
    )


def _serialise(outfits: List[RecommendedOutfit]) -> List[Dict[str, Any]]:
    return [outfit.to_dict() for outfit in outfits]


def create_app(stylist: StylistApp | None = None) -> FastAPI:
    """Build the FastAPI application around a :class:`StylistApp`."""

    stylist = stylist or StylistApp()
    api = FastAPI(title="Wardrobe Stylist", version="0.1.0")
    api.state.stylist = stylist

    @api.get("/healthz")
    async def healthcheck() -> dict:
        """Readiness check for the service and its weather backend."""

        return {
            "status": "ok",
            "service": "wardrobe-stylist",
            "environment": stylist.config.environment or "local",
            "weather_backend": stylist.config.weather_backend,
        }

    @api.put("/users/{user_id}/wardrobe")
    async def replace_wardrobe(user_id: str, request: WardrobeRequest) -> dict:
        try:
            items = [from_raw_metadata(raw) for raw in request.items]
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        stored = stylist.store.replace_items_for_user(user_id, items)
        return {"count": len(stored)}

    @api.get("/users/{user_id}/recommendations")
    def list_recommendations(
        user_id: str,
        occasion: str | None = None,
        season: str | None = None,
        weather_based: bool = False,
        location: str | None = None,
        style_preference: str | None = None,
        color_scheme: str | None = None,
        limit: int = Query(5, ge=1, le=20),
    ) -> dict:
        """Recommend outfits from query criteria or the current weather."""

        try:
            if weather_based:
                recommendations = stylist.recommend_for_weather(user_id, location)
            else:
                criteria = OutfitCriteria(
                    occasion=occasion,
                    season=_season_or_422(season),
                    style_preference=_split_csv(style_preference),
                    color_scheme=_split_csv(color_scheme),
                )
                recommendations = stylist.recommend(user_id, criteria)
        except NoWardrobeItemsError as exc:
            raise HTTPException(status_code=404, detail=NO_ITEMS_MESSAGE) from exc

        limited = recommendations[:limit]
        return {
            "recommendations": _serialise(limited),
            "count": len(limited),
            "total_available": len(recommendations),
        }

    @api.post("/users/{user_id}/recommendations")
    def create_recommendations(user_id: str, request: CriteriaRequest) -> dict:
        """Recommend outfits for an explicit criteria payload."""

        criteria = _to_criteria(request)
        try:
            items_count = len(stylist.store.list_items_for_user(user_id))
            recommendations = stylist.recommend(user_id, criteria)
        except NoWardrobeItemsError as exc:
            raise HTTPException(status_code=404, detail=NO_ITEMS_MESSAGE) from exc

        stylist.record_request(user_id, criteria, items_count, len(recommendations))
        return {"recommendations": _serialise(recommendations), "count": len(recommendations)}

    return api


app = create_app()


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=8080, reload=False)
