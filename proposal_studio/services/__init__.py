"""Services module - Editing-session operations."""

from proposal_studio.services.proposal_editor import (
    create_default_proposal,
    create_section,
    add_section,
    update_section,
    delete_section,
    move_section,
    update_theme,
    apply_analysis,
)

__all__ = [
    "create_default_proposal",
    "create_section",
    "add_section",
    "update_section",
    "delete_section",
    "move_section",
    "update_theme",
    "apply_analysis",
]
