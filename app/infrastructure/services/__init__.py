"""
Dependency injection services.

Provides the settings provider. FastAPI type aliases live in
``infrastructure.services.dependencies``:

    from infrastructure.services.dependencies import TranslatorDep

    @router.get("/greeting")
    def greeting(translator: TranslatorDep):
        return {"message": translator.translate("Hello")}
"""

from infrastructure.services.providers import get_settings

__all__ = [
    "get_settings",
]
