"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date, datetime
from uuid import UUID
from zoneinfo import ZoneInfo

from fastapi import Depends, FastAPI, Header, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from pantry_tracker.api.schemas import (
    FoodItemCreate,
    FoodItemOut,
    FoodItemWithDaysLeftOut,
    NotificationOut,
    RecipeWithMatchOut,
    SummaryOut,
    UserCreate,
    UserOut,
)
from pantry_tracker.app_logging import configure_logging
from pantry_tracker.containers import AppContainer
from pantry_tracker.domain.models import UserRecord
from pantry_tracker.domain.suggestions import RecipeSuggestion
from pantry_tracker.errors import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    PantryTrackerError,
    PermissionDeniedError,
    SuggestionsUnavailableError,
)

_ERROR_STATUS: dict[type[PantryTrackerError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    SuggestionsUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


def current_user(
    x_user_id: str | None = Header(default=None),
    container: AppContainer = Depends(_get_container),
) -> UserRecord:
    """Resolve the calling user from the X-User-Id header."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        user_id = UUID(x_user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from None
    try:
        return container.user_service.get_user(user_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from None


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    tz = ZoneInfo(container.settings.timezone)

    def today() -> date:
        return datetime.now(tz=tz).date()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(PantryTrackerError)
    async def handle_domain_error(
        request: Request, exc: PantryTrackerError
    ) -> JSONResponse:
        status_code = next(
            (
                code
                for error_type, code in _ERROR_STATUS.items()
                if isinstance(exc, error_type)
            ),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
        return JSONResponse(status_code=status_code, content={"message": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/users", status_code=status.HTTP_201_CREATED)
    async def register_user(payload: UserCreate, request: Request) -> UserOut:
        """Register a new user."""
        state_container: AppContainer = request.app.state.container
        user = state_container.user_service.register(payload.username, payload.name)
        return UserOut.from_domain(user)

    @app.get("/api/users/me")
    async def me(user: UserRecord = Depends(current_user)) -> UserOut:
        """Return the calling user."""
        return UserOut.from_domain(user)

    @app.get("/api/food-items")
    async def list_food_items(
        request: Request, user: UserRecord = Depends(current_user)
    ) -> list[FoodItemWithDaysLeftOut]:
        """Return all food items with days left."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.inventory_service.list_items(user.id, today())
        return [FoodItemWithDaysLeftOut.from_entry(entry) for entry in entries]

    @app.post("/api/food-items", status_code=status.HTTP_201_CREATED)
    async def create_food_item(
        payload: FoodItemCreate,
        request: Request,
        user: UserRecord = Depends(current_user),
    ) -> FoodItemOut:
        """Log a new food item."""
        state_container: AppContainer = request.app.state.container
        item = state_container.inventory_service.create_item(
            user.id,
            name=payload.name,
            category=payload.category,
            manufacture_date=payload.manufacture_date,
            expiry_date=payload.expiry_date,
            price=payload.price,
            image=payload.image,
        )
        return FoodItemOut.from_domain(item)

    @app.delete("/api/food-items/{item_id}")
    async def delete_food_item(
        item_id: UUID, request: Request, user: UserRecord = Depends(current_user)
    ) -> dict[str, str]:
        """Delete one of the caller's food items."""
        state_container: AppContainer = request.app.state.container
        state_container.inventory_service.delete_item(user.id, item_id)
        return {"message": "Food item deleted successfully"}

    @app.get("/api/expiring-items")
    async def expiring_items(
        request: Request, user: UserRecord = Depends(current_user)
    ) -> list[FoodItemWithDaysLeftOut]:
        """Return items expiring within a week."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.inventory_service.expiring_items(user.id, today())
        return [FoodItemWithDaysLeftOut.from_entry(entry) for entry in entries]

    @app.get("/api/dashboard")
    async def dashboard(
        request: Request, user: UserRecord = Depends(current_user)
    ) -> SummaryOut:
        """Return inventory summary counts."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.inventory_service.summary(user.id, today())
        return SummaryOut.from_domain(summary)

    @app.get("/api/notifications")
    async def notifications(
        request: Request, user: UserRecord = Depends(current_user)
    ) -> list[NotificationOut]:
        """Return expiry notifications."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.inventory_service.notifications(
            user.id, datetime.now(tz=tz)
        )
        return [NotificationOut.from_domain(entry) for entry in entries]

    @app.get("/api/recipes")
    async def recipes(
        request: Request, user: UserRecord = Depends(current_user)
    ) -> list[RecipeWithMatchOut]:
        """Return catalog recipes ranked by inventory match."""
        state_container: AppContainer = request.app.state.container
        items = state_container.inventory_service.items(user.id)
        ranked = state_container.recipe_service.rank_for(items)
        return [RecipeWithMatchOut.from_domain(match) for match in ranked]

    @app.get("/api/ai-recipes")
    async def ai_recipes(
        request: Request,
        user: UserRecord = Depends(current_user),
        count: int | None = Query(default=None, ge=1, le=10),
    ) -> list[RecipeSuggestion]:
        """Return AI-generated recipes for the caller's ingredients."""
        state_container: AppContainer = request.app.state.container
        names = state_container.inventory_service.suggestion_ingredients(user.id)
        try:
            return await state_container.suggestion_service.suggest(names, count)
        except PantryTrackerError:
            raise
        except Exception:
            logger.exception(
                "Failed to get AI recipe suggestions", extra={"user_id": user.id}
            )
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Failed to get AI recipe suggestions",
            ) from None

    @app.get("/api/medicines")
    async def medicines(
        request: Request, user: UserRecord = Depends(current_user)
    ) -> list[FoodItemWithDaysLeftOut]:
        """Return medicinal items with days left."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.inventory_service.medicines(user.id, today())
        return [FoodItemWithDaysLeftOut.from_entry(entry) for entry in entries]

    return app
