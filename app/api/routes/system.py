from fastapi import APIRouter

from infrastructure.services.dependencies import SettingsDep, TranslatorRegistryDep

router = APIRouter(tags=["System"])


@router.get("/version")
def get_version(settings: SettingsDep):
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
def get_health(registry: TranslatorRegistryDep):
    """Healthcheck endpoint."""
    return {"status": "ok", "translators": registry.loaded()}
