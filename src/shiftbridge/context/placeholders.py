"""Placeholder resolution for agent-supplied text.

Two placeholder forms may appear in tool inputs:

    §§§Env§<EnvironmentName>§<VariableName>§§§
    §§§Blob§<blobId>§§§

Environment placeholders are resolved against the host's environments;
unknown names are left as-is.  Blob placeholders reference payloads held
out of band (see :class:`~shiftbridge.context.assembly.PayloadBlobStore`)
and must all resolve, otherwise the whole resolution fails and no
half-resolved text is returned.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shiftbridge.core.errors import PlaceholderError
from shiftbridge.core.result import Err, Ok, Result

if TYPE_CHECKING:
    from shiftbridge.host import HostSDK

logger = logging.getLogger(__name__)

ENV_PLACEHOLDER_PATTERN = re.compile(r"§§§Env§([^§]+)§([^§]+)§§§")
BLOB_PLACEHOLDER_PATTERN = re.compile(r"§§§Blob§([^§]+)§§§")

PayloadBlobLookup = Callable[[str], Awaitable[str | None]]
EnvironmentLookup = Callable[[str, str], str | None]


@dataclass(slots=True)
class EnvironmentData:
    """Name and variables of one host environment."""

    name: str
    variables: dict[str, str] = field(default_factory=dict)


def create_environment_lookup(environments: Iterable[EnvironmentData]) -> EnvironmentLookup:
    """Build a ``(env_name, var_name) -> value`` lookup."""
    env_map = {env.name: dict(env.variables) for env in environments}

    def lookup(env_name: str, var_name: str) -> str | None:
        return env_map.get(env_name, {}).get(var_name)

    return lookup


def substitute_environment_placeholders(text: str, lookup: EnvironmentLookup) -> str:
    """Replace environment placeholders; unresolved ones are kept verbatim."""

    def _replace(match: re.Match[str]) -> str:
        value = lookup(match.group(1), match.group(2))
        return match.group(0) if value is None else value

    return ENV_PLACEHOLDER_PATTERN.sub(_replace, text)


async def _fetch_environments(sdk: HostSDK, names: set[str]) -> list[EnvironmentData]:
    listed = await sdk.graphql.environments()
    result: list[EnvironmentData] = []
    for summary in listed:
        if summary.name not in names:
            continue
        environment = await sdk.graphql.environment(summary.id)
        variables = {v.name: v.value for v in environment.variables} if environment else {}
        result.append(EnvironmentData(name=summary.name, variables=variables))
    return result


async def _substitute_blob_placeholders(text: str, lookup: PayloadBlobLookup) -> str:
    # Lookups are awaited one at a time, in order of appearance.
    values: dict[str, str] = {}
    for blob_id in dict.fromkeys(BLOB_PLACEHOLDER_PATTERN.findall(text)):
        value = await lookup(blob_id)
        if value is None:
            msg = (
                f'Payload blob "{blob_id}" was not found in this run. '
                "Create it with PayloadBlobCreate and retry using the returned blobId."
            )
            raise PlaceholderError(msg)
        values[blob_id] = value

    return BLOB_PLACEHOLDER_PATTERN.sub(lambda m: values[m.group(1)], text)


async def resolve_placeholders(
    text: str,
    *,
    sdk: HostSDK | None = None,
    payload_blob_lookup: PayloadBlobLookup | None = None,
) -> Result[str, str]:
    """Resolve environment and blob placeholders in *text*.

    Args:
        text: Agent-supplied text that may contain placeholders.
        sdk: Host handle used to look up environments.  Without it,
            environment placeholders are left untouched.
        payload_blob_lookup: Async ``blob_id -> value`` lookup.  Required
            when the text contains blob placeholders.

    Returns:
        ``Ok`` with the fully resolved text, or a single ``Err`` describing
        why resolution failed.
    """
    try:
        resolved = text

        env_names = {m.group(1) for m in ENV_PLACEHOLDER_PATTERN.finditer(resolved)}
        if env_names and sdk is not None:
            environments = await _fetch_environments(sdk, env_names)
            resolved = substitute_environment_placeholders(
                resolved, create_environment_lookup(environments)
            )

        if BLOB_PLACEHOLDER_PATTERN.search(resolved) is None:
            return Ok(resolved)

        if payload_blob_lookup is None:
            return Err(
                "Payload blob placeholders are not available in this context. "
                "Create a blob with PayloadBlobCreate and retry with §§§Blob§blobId§§§."
            )

        return Ok(await _substitute_blob_placeholders(resolved, payload_blob_lookup))
    except PlaceholderError as exc:
        return Err(str(exc))
    except Exception as exc:
        logger.warning("Placeholder resolution failed: %s", exc)
        return Err(str(exc) or "Failed to resolve placeholders")
