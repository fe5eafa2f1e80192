"""FastAPI wiring of the per-request translation cache.

Routes opt in with the ``TranslatorAutoloadDep`` dependency. The dependency
resolves the request locale, binds the translator to the route and runs the
``initialize`` and ``startup`` phases before the endpoint, and ``shutdown``
after it. The translator gets its own domains for the request, so concurrent
requests to other routes do not change them. Endpoints call ``render()`` or
``redirect()`` so the ``before_render`` and ``before_redirect`` phases run at
the right time::

    def group_page(group_id):
        return {"title": translate("Group.name"), "id": group_id}

    @router.get("/groups/{group_id}", name="view", tags=["groups"])
    def view_group(group_id: str, autoload: TranslatorAutoloadDep):
        return render(autoload, group_page, group_id)

Route parameters are taken from the matched route: the controller is the
route's first tag (else the endpoint module name), the action is the route
name and the plugin is the ``x-plugin`` OpenAPI extra, if any.
"""

from typing import Annotated, Any, AsyncGenerator, Callable, Optional

from fastapi import Depends, Request
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool

from infrastructure.i18n.autoload import RequestCacheBinding, RouteParams
from infrastructure.i18n.locale import reset_locale, set_locale
from infrastructure.i18n.registry import get_registry
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.stores import get_store
from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()

PLUGIN_OPENAPI_EXTRA = "x-plugin"
CORRELATION_ID_HEADER = "x-correlation-id"


def route_params_from_request(request: Request) -> RouteParams:
    """Return the plugin, controller and action of the matched route."""
    route = request.scope.get("route")
    if route is None:
        return RouteParams()

    plugin: Optional[str] = None
    openapi_extra = getattr(route, "openapi_extra", None) or {}
    if openapi_extra.get(PLUGIN_OPENAPI_EXTRA):
        plugin = str(openapi_extra[PLUGIN_OPENAPI_EXTRA])

    tags = getattr(route, "tags", None) or []
    if tags:
        controller = str(tags[0])
    else:
        endpoint = getattr(route, "endpoint", None)
        module = getattr(endpoint, "__module__", "") or ""
        controller = module.rsplit(".", 1)[-1] or None

    return RouteParams(
        plugin=plugin,
        controller=controller,
        action=getattr(route, "name", None),
    )


def resolve_request_locale(request: Request) -> str:
    i18n_settings = get_settings().i18n
    resolver = LocaleResolver(
        default_locale=i18n_settings.I18N_DEFAULT_LOCALE,
        supported_locales=i18n_settings.I18N_SUPPORTED_LOCALES,
    )
    return resolver.resolve_from_header(request.headers.get("accept-language"))


async def translator_autoload(
    request: Request,
) -> AsyncGenerator[RequestCacheBinding, None]:
    """Bind the default translator to the current route for one request."""
    settings = get_settings()
    registry = get_registry()
    translator = registry.get(registry.default_translator())

    set_locale(resolve_request_locale(request))
    translator.begin_scope()
    binding = RequestCacheBinding(
        translator=translator,
        store=get_store(),
        route=route_params_from_request(request),
        events=settings.translator.TRANSLATOR_AUTOLOAD_EVENTS or None,
    )
    request.state.translator_autoload = binding

    with bind_request_context(
        correlation_id=request.headers.get(CORRELATION_ID_HEADER),
        request_path=request.url.path,
        request_method=request.method,
        cache_key=binding.cache_key(),
        locale=translator.lang(),
    ):
        logger.debug("translator_autoload_bound", domains=binding.domains())
        try:
            await run_in_threadpool(binding.initialize)
            await run_in_threadpool(binding.startup)
            yield binding
        finally:
            try:
                await run_in_threadpool(binding.shutdown)
            finally:
                translator.end_scope()
                reset_locale()


def render(
    binding: RequestCacheBinding, view: Callable[..., Any], *args: Any, **kwargs: Any
) -> Any:
    """Run the ``before_render`` phase, then build the response with ``view``.

    Messages translated by ``view`` see the domains and cached entries loaded
    for the route; messages translated earlier in the endpoint only do when
    the cache is loaded at ``initialize`` or ``startup``.
    """
    binding.before_render()
    return view(*args, **kwargs)


def redirect(
    binding: RequestCacheBinding, url: str, status_code: int = 307
) -> RedirectResponse:
    """Run the ``before_redirect`` phase and return a redirect to ``url``."""
    binding.before_redirect()
    return RedirectResponse(url=url, status_code=status_code)


TranslatorAutoloadDep = Annotated[RequestCacheBinding, Depends(translator_autoload)]
