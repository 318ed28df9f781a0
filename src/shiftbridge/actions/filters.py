"""HTTPQL filter preset actions."""

from __future__ import annotations

import logging

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.core.result import ActionResult, err, err_from_exception, ok

logger = logging.getLogger(__name__)


def append_query(query: str, addition: str) -> str:
    """Append *addition* to *query*, inserting one space unless it already ends with one."""
    if query.endswith(" "):
        return query + addition
    return f"{query} {addition}"


class FilterAddInput(ActionInput):
    filter_name: str = Field(min_length=1, description="Name of the filter")
    query: str = Field(min_length=1, description="HTTPQL query for the filter")
    alias: str = Field(min_length=1, description="Alias for the filter")


@action("FilterAdd", "Create a new filter preset with an HTTPQL query.", FilterAddInput)
async def filter_add(params: FilterAddInput, context: ActionContext) -> ActionResult:
    try:
        created = await context.sdk.filters.create(
            name=params.filter_name, query=params.query, alias=params.alias
        )
    except Exception as exc:
        return err_from_exception("Failed to create filter", exc)
    if created is None:
        return err("Failed to create filter")
    return ok(f"Filter {params.filter_name} created successfully", id=created.id)


class FilterUpdateInput(ActionInput):
    id: str = Field(min_length=1, description="ID of the filter to update")
    filter_name: str = Field(min_length=1, description="New name for the filter")
    alias: str = Field(min_length=1, description="New alias for the filter")
    query: str = Field(min_length=1, description="New HTTPQL query for the filter")


@action(
    "FilterUpdate",
    "Update the name, alias and HTTPQL query of an existing filter preset.",
    FilterUpdateInput,
)
async def filter_update(params: FilterUpdateInput, context: ActionContext) -> ActionResult:
    try:
        await context.sdk.filters.update(
            params.id, name=params.filter_name, alias=params.alias, query=params.query
        )
    except Exception as exc:
        return err_from_exception("Failed to update filter", exc)
    return ok(f"Filter {params.id} updated successfully")


class FilterDeleteInput(ActionInput):
    id: str = Field(min_length=1, description="ID of the filter to delete")


@action("FilterDelete", "Delete a filter preset.", FilterDeleteInput)
async def filter_delete(params: FilterDeleteInput, context: ActionContext) -> ActionResult:
    try:
        await context.sdk.filters.delete(params.id)
    except Exception as exc:
        return err_from_exception("Failed to delete filter", exc)
    return ok("Filter deleted successfully")


class FilterQueryAppendInput(ActionInput):
    id: str = Field(min_length=1, description="ID of the filter to update")
    append_query: str = Field(
        min_length=1, description="Text to append to the existing HTTPQL query"
    )


@action(
    "FilterQueryAppend",
    "Append text to the HTTPQL query of an existing filter preset.",
    FilterQueryAppendInput,
)
async def filter_query_append(
    params: FilterQueryAppendInput, context: ActionContext
) -> ActionResult:
    try:
        filters = context.sdk.filters.get_all()
    except Exception as exc:
        return err_from_exception("Failed to read filters", exc)
    target = next((f for f in filters if f.id == params.id), None)
    if target is None:
        return err("Filter not found")

    query = append_query(target.query, params.append_query)
    try:
        await context.sdk.filters.update(
            params.id, name=target.name, alias=target.alias, query=query
        )
    except Exception as exc:
        logger.debug("Filter %s update failed: %s", params.id, exc)
        return err_from_exception("Failed to update filter", exc)
    return ok(f"Query appended to filter {params.id} successfully", query=query)


ACTIONS = [filter_add, filter_update, filter_delete, filter_query_append]
