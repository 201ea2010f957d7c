"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from body_tracker.adapters.openai_suggestion_client import OpenAISuggestionClient
from body_tracker.adapters.supabase_progress_repository import (
    SupabaseProgressRepository,
)
from body_tracker.config import Settings
from body_tracker.domain.catalog import FOOD_CATALOG, FoodCatalog
from body_tracker.services.progress import DailyProgressService
from body_tracker.services.suggestions import SuggestionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    progress_service: DailyProgressService
    suggestion_service: SuggestionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    progress_service = DailyProgressService(
        repository=SupabaseProgressRepository(supabase_client),
        catalog=FOOD_CATALOG,
    )
    suggestion_client = OpenAISuggestionClient.create(
        api_key=resolved_settings.openai_api_key,
        base_url=resolved_settings.openai_base_url,
    )
    suggestion_service = SuggestionService(
        client=suggestion_client,
        model=resolved_settings.openai_model,
    )

    async def close_resources() -> None:
        await suggestion_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=FOOD_CATALOG,
        progress_service=progress_service,
        suggestion_service=suggestion_service,
        close_resources=close_resources,
    )
