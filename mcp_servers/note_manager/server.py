"""
Smart Notes MCP Server

Exposes the notes engine as Model Context Protocol tools: compose a draft
that is auto-classified while it is written, save and delete notes, and
browse the collection through color, tag and text filters.
Runs with SSE transport on the configured port (8001 by default).
"""

import logging
from datetime import UTC, datetime

from mcp.server.fastmcp import FastMCP

from smart_notes.app import NotesApp
from smart_notes.config import settings
from smart_notes.errors import NotesError, PersistenceFailure
from smart_notes.keywords import ALL

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger("note_manager")

# ---------------------------------------------------------------------------
# MCP server + application state
# ---------------------------------------------------------------------------
mcp = FastMCP("smart-notes", host=settings.server_host, port=settings.server_port)
app = NotesApp.from_settings(settings)
app.load()


def _draft_view() -> dict:
    return app.draft.snapshot()


def _notes_view() -> dict:
    notes = app.visible_notes()
    return {
        "count": len(notes),
        "filters": app.filters.model_dump(mode="json"),
        "notes": [n.model_dump(mode="json") for n in notes],
    }


# ---------------------------------------------------------------------------
# Draft tools
# ---------------------------------------------------------------------------


@mcp.tool()
def update_draft(title: str, content: str) -> dict:
    """Update the note being written and re-suggest its color and tags.

    Call this every time the title or content changes. Color and tags are
    derived from keywords in the text; a manually chosen color is kept.

    Args:
        title: Current title text (may be empty).
        content: Current body text.

    Returns:
        The draft with its suggested color, color label and tags.
    """
    app.update_draft(title, content)
    return _draft_view()


@mcp.tool()
def set_draft_color(color: str) -> dict:
    """Override the suggested color of the draft.

    Args:
        color: One of red, blue, green, gray.

    Returns:
        The updated draft, or an error for an unknown color.
    """
    try:
        app.set_draft_color(color)
    except ValueError:
        return {"error": f"Unknown color '{color}'."}
    return _draft_view()


@mcp.tool()
def add_draft_tag(tag: str) -> dict:
    """Add a tag of your own to the draft (max 5 tags, no duplicates).

    Args:
        tag: Tag text; it is stored with its first letter capitalized.

    Returns:
        The updated draft, or an error explaining why the tag was rejected.
    """
    try:
        app.add_draft_tag(tag)
    except NotesError as exc:
        return {"error": str(exc)}
    return _draft_view()


@mcp.tool()
def remove_draft_tag(index: int) -> dict:
    """Remove the draft tag at the given position (0-based).

    Args:
        index: Position of the tag in the draft's tag list.

    Returns:
        The updated draft, or an error for an invalid position.
    """
    try:
        app.remove_draft_tag(index)
    except IndexError as exc:
        return {"error": str(exc)}
    return _draft_view()


@mcp.tool()
def clear_draft() -> dict:
    """Discard the draft and any manual color choice."""
    app.clear_draft()
    return _draft_view()


# ---------------------------------------------------------------------------
# Note tools
# ---------------------------------------------------------------------------


@mcp.tool()
def save_note() -> dict:
    """Save the current draft as a new note at the top of the list.

    Returns:
        Dictionary with the new note_id and a confirmation message, or an
        error. A storage error is reported but the note stays in memory.
    """
    try:
        note = app.save_note()
    except NotesError as exc:
        logger.warning("Tool save_note failed — %s", exc)
        result = {"error": str(exc), "total_notes": len(app.store)}
        if isinstance(exc, PersistenceFailure) and exc.note is not None:
            # stored in memory, not on disk
            result["note_id"] = exc.note.id
            result["note"] = exc.note.model_dump(mode="json")
        return result
    logger.info("Tool save_note invoked — id=%s", note.id)
    return {
        "note_id": note.id,
        "note": note.model_dump(mode="json"),
        "message": "Nota guardada exitosamente",
    }


@mcp.tool()
def delete_note(note_id: str) -> dict:
    """Delete a note by id. Deleting an unknown id does nothing.

    Args:
        note_id: Id returned by save_note.

    Returns:
        Whether a note was removed, plus a message or a storage error.
    """
    try:
        deleted = app.delete_note(note_id)
    except NotesError as exc:
        logger.warning("Tool delete_note failed — %s", exc)
        return {"deleted": True, "error": str(exc)}
    logger.info("Tool delete_note invoked — id=%s, deleted=%s", note_id, deleted)
    return {
        "deleted": deleted,
        "message": "Nota eliminada" if deleted else "La nota no existe.",
    }


# ---------------------------------------------------------------------------
# Query tools
# ---------------------------------------------------------------------------


@mcp.tool()
def set_filters(color: str = ALL, tag: str = ALL, search: str = "") -> dict:
    """Set the color, tag and text filters and return the matching notes.

    Args:
        color: red, blue, green, gray, or "all".
        tag: Exact tag name (e.g. "Trabajo"), or "all".
        search: Case-insensitive text matched against title, content and tags.

    Returns:
        Dictionary with the matching notes (most recent first) and count.
    """
    try:
        app.set_color_filter(color)
    except ValueError:
        return {"error": f"Unknown color '{color}'."}
    app.set_tag_filter(tag)
    app.set_search_filter(search)
    view = _notes_view()
    logger.info("Tool set_filters invoked — found=%d", view["count"])
    return view


@mcp.tool()
async def type_search(text: str) -> dict:
    """Update the search box as the user types.

    Updates are debounced: only the last text typed within the debounce
    window is applied. Call list_notes afterwards to see the results.

    Args:
        text: Full current content of the search box.
    """
    app.schedule_search(text)
    return {"scheduled": text, "delay_seconds": settings.search_debounce_seconds}


@mcp.tool()
def list_notes() -> dict:
    """List the notes matching the current filters, most recent first."""
    view = _notes_view()
    logger.info("Tool list_notes invoked — found=%d", view["count"])
    return view


@mcp.tool()
def list_tags() -> dict:
    """List every tag in use across all notes, sorted alphabetically."""
    return {"tags": app.available_tags()}


@mcp.tool()
def health_check() -> dict:
    """Check whether the Smart Notes server is healthy.

    Returns:
        Dictionary with server status, note count, and timestamp.
    """
    logger.info("Tool health_check invoked")
    return {
        "status": "healthy",
        "server": "smart-notes",
        "total_notes": len(app.store),
        "timestamp": datetime.now(UTC).isoformat(),
    }


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logger.info("Starting Smart Notes MCP server on port %d ...", settings.server_port)
    mcp.run(transport="sse")
