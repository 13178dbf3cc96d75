"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from intake_calendar.adapters.redis_hash_cache import RedisHashCache
from intake_calendar.adapters.supabase_intake_log_repository import (
    SupabaseIntakeLogRepository,
)
from intake_calendar.adapters.supabase_profile_snapshot_repository import (
    SupabaseProfileSnapshotRepository,
)
from intake_calendar.adapters.supabase_reference_repository import (
    SupabaseActivityLevelRepository,
    SupabaseNutrientPlanRepository,
)
from intake_calendar.adapters.supabase_user_repository import SupabaseUserRepository
from intake_calendar.config import Settings
from intake_calendar.services.cache import HashCache, InMemoryHashCache
from intake_calendar.services.calendar_cache import IntakeCalendarCache
from intake_calendar.services.intake import IntakeLogService
from intake_calendar.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    intake_log_service: IntakeLogService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    hash_cache: HashCache
    redis_cache: RedisHashCache | None = None
    if resolved_settings.redis_url:
        redis_cache = RedisHashCache.create(
            resolved_settings.redis_url, key_prefix=resolved_settings.redis_key_prefix
        )
        hash_cache = redis_cache
    else:
        hash_cache = InMemoryHashCache()

    calendar_cache = IntakeCalendarCache(
        cache=hash_cache,
        ttl=timedelta(days=resolved_settings.calendar_cache_ttl_days),
    )
    intake_log_service = IntakeLogService(
        intake_log_repository=SupabaseIntakeLogRepository(supabase_client),
        snapshot_repository=SupabaseProfileSnapshotRepository(supabase_client),
        activity_level_repository=SupabaseActivityLevelRepository(supabase_client),
        nutrient_plan_repository=SupabaseNutrientPlanRepository(supabase_client),
        calendar_cache=calendar_cache,
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))

    async def close_resources() -> None:
        if redis_cache is not None:
            redis_cache.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        intake_log_service=intake_log_service,
        close_resources=close_resources,
    )
