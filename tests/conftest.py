"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

import pytest

from body_tracker.config import Settings
from body_tracker.containers import AppContainer
from body_tracker.domain.catalog import FOOD_CATALOG
from body_tracker.domain.progress import DailyProgress
from body_tracker.services.progress import DailyProgressService, ProgressRepository
from body_tracker.services.suggestions import (
    SuggestionClient,
    SuggestionError,
    SuggestionService,
)


@dataclass
class InMemoryProgressRepository(ProgressRepository):
    """In-memory progress repository for tests."""

    rows: dict[tuple[UUID, date], DailyProgress] = field(default_factory=dict)
    upserts: int = 0

    def upsert_progress(self, progress: DailyProgress) -> None:
        self.upserts += 1
        self.rows[(progress.user_id, progress.day)] = progress

    def get_progress(self, user_id: UUID, day: date) -> DailyProgress | None:
        return self.rows.get((user_id, day))

    def list_dates(self, user_id: UUID) -> list[date]:
        days = [day for owner, day in self.rows if owner == user_id]
        return sorted(days, reverse=True)


@dataclass
class FakeSuggestionClient(SuggestionClient):
    """Fake suggestion client that records prompts."""

    text: str = "Eat more protein and walk daily."
    error: SuggestionError | None = None
    calls: list[dict[str, str]] = field(default_factory=list)

    async def complete(
        self, *, model: str, system_prompt: str, user_prompt: str
    ) -> str:
        self.calls.append(
            {"model": model, "system_prompt": system_prompt, "user_prompt": user_prompt}
        )
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        openai_api_key="openai-key",
    )


@pytest.fixture
def progress_repository() -> InMemoryProgressRepository:
    return InMemoryProgressRepository()


@pytest.fixture
def suggestion_client() -> FakeSuggestionClient:
    return FakeSuggestionClient()


@pytest.fixture
def container(
    settings: Settings,
    progress_repository: InMemoryProgressRepository,
    suggestion_client: FakeSuggestionClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=FOOD_CATALOG,
        progress_service=DailyProgressService(progress_repository),
        suggestion_service=SuggestionService(
            client=suggestion_client, model=settings.openai_model
        ),
        close_resources=close_resources,
    )
