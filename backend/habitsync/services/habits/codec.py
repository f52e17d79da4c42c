"""
Notion Property Codec - Translates habit entries to and from page properties

Habit lists are stored as comma-separated text and empty values are
written as placeholder strings. The placeholders never leave this module.
"""
from typing import Any, Dict, List

from habitsync.core.constants import (
    NOTION_TEXT_LIMIT,
    PROPERTY_COMPLETED,
    PROPERTY_DATE,
    PROPERTY_HABITS,
    PROPERTY_NOTES,
    PROPERTY_PROGRESS,
)
from habitsync.models.entry import HabitEntry

EMPTY_COMPLETED = "(None)"
EMPTY_NOTES = "(No notes)"
LABEL_SEPARATOR = ", "


# ============================================================================
# FIELD ENCODING
# ============================================================================

def join_labels(labels: List[str]) -> str:
    """Join habit labels into the stored text form"""
    return LABEL_SEPARATOR.join(labels)


def split_labels(text: str) -> List[str]:
    """
    Split stored text back into habit labels

    Args:
        text: Comma-separated labels

    Returns:
        Stripped labels in order, with empty items dropped
    """
    if not text:
        return []
    return [label.strip() for label in text.split(",") if label.strip()]


def encode_completed(labels: List[str]) -> str:
    return join_labels(labels) if labels else EMPTY_COMPLETED


def decode_completed(text: str) -> List[str]:
    if text == EMPTY_COMPLETED:
        return []
    return split_labels(text)


def encode_notes(notes: str) -> str:
    return notes or EMPTY_NOTES


def decode_notes(text: str) -> str:
    return "" if text == EMPTY_NOTES else text


def completion_map(habits: List[str], completed: List[str]) -> Dict[str, bool]:
    """
    Map completed labels onto habit positions

    Labels missing from the habit list are dropped. Keys are string
    positions so the map serializes to JSON unchanged.

    Args:
        habits: Ordered habit labels
        completed: Labels marked done

    Returns:
        Dict of position -> True for every completed habit found
    """
    done = {}
    for label in completed:
        if label in habits:
            done[str(habits.index(label))] = True
    return done


# ============================================================================
# NOTION PROPERTY SHAPES
# ============================================================================

def rich_text(content: str) -> List[Dict[str, Any]]:
    """Wrap text as Notion rich text, splitting at Notion's per-object limit"""
    chunks = [content[i:i + NOTION_TEXT_LIMIT] for i in range(0, len(content), NOTION_TEXT_LIMIT)]
    return [{"text": {"content": chunk}} for chunk in chunks or [""]]


def plain_text(prop: Dict[str, Any]) -> str:
    """
    Read the full text of a title or rich_text property

    Args:
        prop: Property value from a Notion page

    Returns:
        Concatenated text of every segment, or "" when absent
    """
    if not prop:
        return ""
    segments = prop.get("title") or prop.get("rich_text") or []
    parts = []
    for segment in segments:
        text = segment.get("plain_text")
        if text is None:
            text = segment.get("text", {}).get("content", "")
        parts.append(text)
    return "".join(parts)


def build_properties(entry: HabitEntry) -> Dict[str, Any]:
    """
    Encode a habit entry as a Notion property bag

    Args:
        entry: The day's habit entry

    Returns:
        Properties dict accepted by pages.create and pages.update
    """
    return {
        PROPERTY_DATE: {"title": rich_text(entry.date)},
        PROPERTY_HABITS: {"rich_text": rich_text(join_labels(entry.habits))},
        PROPERTY_COMPLETED: {"rich_text": rich_text(encode_completed(entry.completed))},
        PROPERTY_PROGRESS: {"number": entry.completion_percentage},
        PROPERTY_NOTES: {"rich_text": rich_text(encode_notes(entry.notes))},
    }


def parse_page(page: Dict[str, Any], default_date: str = "") -> HabitEntry:
    """
    Decode a Notion page into a habit entry

    Args:
        page: Page object returned by a database query
        default_date: Date to use when the page has no title text

    Returns:
        HabitEntry with the page id attached
    """
    props = page.get("properties", {})
    progress = props.get(PROPERTY_PROGRESS, {}).get("number")

    return HabitEntry(
        date=plain_text(props.get(PROPERTY_DATE)) or default_date,
        habits=split_labels(plain_text(props.get(PROPERTY_HABITS))),
        completed=decode_completed(plain_text(props.get(PROPERTY_COMPLETED))),
        notes=decode_notes(plain_text(props.get(PROPERTY_NOTES))),
        completion_percentage=progress if progress is not None else 0,
        page_id=page.get("id"),
    )
