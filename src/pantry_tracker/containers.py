"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import Client, create_client

from pantry_tracker.adapters.openai_suggestion_client import OpenAISuggestionClient
from pantry_tracker.adapters.static_recipe_catalog import StaticRecipeCatalog
from pantry_tracker.adapters.supabase_food_item_repository import (
    SupabaseFoodItemRepository,
)
from pantry_tracker.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from pantry_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from pantry_tracker.config import Settings, resolve_recipe_source
from pantry_tracker.services.inventory import InventoryService
from pantry_tracker.services.recipes import RecipeRepository, RecipeService
from pantry_tracker.services.suggestions import SuggestionService
from pantry_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    inventory_service: InventoryService
    recipe_service: RecipeService
    suggestion_service: SuggestionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    inventory_service = InventoryService(SupabaseFoodItemRepository(supabase_client))
    recipe_service = RecipeService(
        _recipe_repository(resolved_settings.recipe_source, supabase_client)
    )
    openai_client = (
        OpenAISuggestionClient.create(resolved_settings.openai_api_key)
        if resolved_settings.openai_api_key
        else None
    )
    suggestion_service = SuggestionService(
        client=openai_client,
        model=resolved_settings.openai_model,
        store=resolved_settings.openai_store,
        default_count=resolved_settings.ai_recipe_count,
    )

    async def close_resources() -> None:
        if openai_client is not None:
            await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        inventory_service=inventory_service,
        recipe_service=recipe_service,
        suggestion_service=suggestion_service,
        close_resources=close_resources,
    )


def _recipe_repository(source: str, client: Client) -> RecipeRepository:
    if resolve_recipe_source(source) == "supabase":
        return SupabaseRecipeRepository(client)
    return StaticRecipeCatalog()
