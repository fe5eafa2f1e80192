"""Group pages rendered with the route-scoped translation cache.

Every route here opts in to ``TranslatorAutoloadDep``: the messages resolved
while rendering ``GET /groups/{group_id}`` are cached under
``TranslatorAutoload.groups.view`` and reused by the next request.
"""

from fastapi import APIRouter

from infrastructure.i18n.shortcuts import (
    translate,
    translate_context,
    translate_plural,
)
from server.autoload import TranslatorAutoloadDep, redirect, render

router = APIRouter(prefix="/groups", tags=["groups"])
admin_router = APIRouter(prefix="/admin/groups", tags=["groups"])

PLUGIN_ADMIN = {"x-plugin": "Admin"}


def groups_page(count: int) -> dict:
    return {
        "title": translate("Group.name"),
        "summary": translate_plural("group", "groups", count),
        "count": count,
    }


def group_page(group_id: str) -> dict:
    return {
        "id": group_id,
        "title": translate("Group.name"),
        "action": translate("/Groups/view/{{id}}"),
        "value": translate_context("value", "Value {0}", group_id),
    }


@router.get("", name="index")
def list_groups(autoload: TranslatorAutoloadDep, count: int = 0):
    return render(autoload, groups_page, count)


@router.get("/{group_id}", name="view")
def view_group(group_id: str, autoload: TranslatorAutoloadDep):
    return render(autoload, group_page, group_id)


@router.post("/{group_id}/archive", name="archive")
def archive_group(group_id: str, autoload: TranslatorAutoloadDep):
    return redirect(autoload, f"/groups/{group_id}", status_code=303)


@admin_router.get("", name="index", openapi_extra=PLUGIN_ADMIN)
def admin_list_groups(autoload: TranslatorAutoloadDep, count: int = 0):
    return render(autoload, groups_page, count)
