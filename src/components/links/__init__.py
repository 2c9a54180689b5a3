"""
Links component - Short link management against the link service.
"""

from ._impl import (
    filter_links,
    format_created,
    format_last_clicked,
    format_last_clicked_date,
    validate_link_input,
)
from .component import (
    run_create,
    run_delete,
    run_get,
    run_list,
)
from .models import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkListOutput,
    LinkOperationOutput,
    LinkValidationError,
)
from .ports import LinkGatewayPort

__all__ = [
    # Entry points
    "run_create",
    "run_delete",
    "run_get",
    "run_list",
    # Input models
    "CreateLinkInput",
    "DeleteLinkInput",
    "GetLinkInput",
    # Output models
    "LinkOperationOutput",
    "LinkListOutput",
    "LinkValidationError",
    # Ports
    "LinkGatewayPort",
    # Functional core
    "filter_links",
    "format_created",
    "format_last_clicked",
    "format_last_clicked_date",
    "validate_link_input",
]
