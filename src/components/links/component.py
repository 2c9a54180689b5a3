"""
Links component - Link service operations.

Shell Layer - calls the gateway and converts failures into outputs.
"""

from __future__ import annotations

import logging

from src.domain.errors import GatewayError

from .models import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkListOutput,
    LinkOperationOutput,
)
from .ports import LinkGatewayPort

logger = logging.getLogger(__name__)


# --- Shell Layer Functions ---


def run_list(gateway: LinkGatewayPort) -> LinkListOutput:
    """List all links."""
    try:
        links = tuple(gateway.list_links())
    except GatewayError as e:
        logger.warning("List links failed (%s): %s", e.kind.value, e.message)
        return LinkListOutput(
            links=(),
            total=0,
            success=False,
            error_kind=e.kind,
            error_message=e.message,
        )

    return LinkListOutput(links=links, total=len(links))


def run_create(
    input_data: CreateLinkInput,
    gateway: LinkGatewayPort,
) -> LinkOperationOutput:
    """Create a new link. A blank code lets the service pick one."""
    code = (input_data.code or "").strip() or None
    try:
        link = gateway.create_link(input_data.target_url.strip(), code)
    except GatewayError as e:
        logger.warning("Create link failed (%s): %s", e.kind.value, e.message)
        return _failure(e)

    return LinkOperationOutput(link=link, success=True)


def run_get(
    input_data: GetLinkInput,
    gateway: LinkGatewayPort,
) -> LinkOperationOutput:
    """Get a link by code."""
    try:
        link = gateway.get_link(input_data.code)
    except GatewayError as e:
        logger.warning(
            "Get link %s failed (%s): %s", input_data.code, e.kind.value, e.message
        )
        return _failure(e)

    return LinkOperationOutput(link=link, success=True)


def run_delete(
    input_data: DeleteLinkInput,
    gateway: LinkGatewayPort,
) -> LinkOperationOutput:
    """Delete a link."""
    try:
        gateway.delete_link(input_data.code)
    except GatewayError as e:
        logger.warning(
            "Delete link %s failed (%s): %s", input_data.code, e.kind.value, e.message
        )
        return _failure(e)

    return LinkOperationOutput(link=None, success=True)


def _failure(error: GatewayError) -> LinkOperationOutput:
    return LinkOperationOutput(
        link=None,
        success=False,
        error_kind=error.kind,
        error_message=error.message,
    )
