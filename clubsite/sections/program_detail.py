"""
Program detail renderer: description, weekly schedule, coach and timetable download.
"""

from typing import Optional

from ..media import extract_image_url, get_proxy_download_url, sanitize_link
from ..models import ProgramDetailBlock
from ..richtext import extract_text
from .context import RenderContext
from .markup import esc, heading, image, paragraph, section


DEFAULT_DOWNLOAD_LABEL = "Κατέβασε το Πρόγραμμα (PDF)"
SCHEDULE_HEADING = "Εβδομαδιαίο Πρόγραμμα"
SCHEDULE_COLUMNS = ("Ημέρα", "Ώρα", "Επίπεδο")
COACH_HEADING = "Προπονητής/τρια"


def _download_url(value) -> str:
    """Plain links pass through; CMS media references go through the download proxy."""
    if isinstance(value, str):
        url = sanitize_link(value)
        if url and "/api/media/file/" not in url:
            return url
        if not url and ":" in value:
            return ""
    return get_proxy_download_url(value) or ""


def _schedule_table(block: ProgramDetailBlock) -> str:
    head = "".join(f"<th>{esc(column)}</th>" for column in SCHEDULE_COLUMNS)
    rows = "".join(
        f"<tr><td>{esc(slot.day)}</td><td>{esc(slot.time)}</td><td>{esc(slot.level)}</td></tr>"
        for slot in block.schedule
    )
    return (
        f'<div class="schedule">{heading(3, SCHEDULE_HEADING)}'
        f'<table><thead><tr>{head}</tr></thead><tbody>{rows}</tbody></table></div>'
    )


def _coach(block: ProgramDetailBlock) -> str:
    photo = extract_image_url(block.coach_photo)
    details = [heading(4, block.coach_name)]
    if block.coach_studies:
        details.append(paragraph(block.coach_studies, "coach-studies"))
    bio = extract_text(block.coach_bio)
    if bio:
        details.append(paragraph(bio))
    portrait = f'<div class="coach-photo">{image(photo, block.coach_name)}</div>' if photo else ""
    return (
        f'<div class="coach">{heading(3, COACH_HEADING)}'
        f'<div class="coach-body">{portrait}<div class="coach-details">{"".join(details)}</div></div></div>'
    )


def render_program_detail(block: ProgramDetailBlock, context: RenderContext) -> Optional[str]:
    title = block.title or ""
    right = block.image_position == "right"

    text_parts = []
    description = extract_text(block.description)
    if description:
        text_parts.append(paragraph(description, "lead"))
    additional = extract_text(block.additional_info)
    if additional:
        text_parts.append(paragraph(additional, "additional-info"))
    if block.schedule:
        text_parts.append(_schedule_table(block))
    download_url = _download_url(block.download_url)
    if download_url:
        label = block.download_label or DEFAULT_DOWNLOAD_LABEL
        text_parts.append(f'<a href="{esc(download_url)}" class="btn btn-secondary" download>{esc(label)}</a>')

    columns = [f'<div class="program-text">{"".join(text_parts)}</div>']
    picture = extract_image_url(block.image)
    if picture:
        image_column = f'<div class="program-image">{image(picture, title)}</div>'
        if right:
            columns.append(image_column)
        else:
            columns.insert(0, image_column)

    parts = [heading(2, title, "text-center")] if title else []
    parts.append(f'<div class="grid grid-2">{"".join(columns)}</div>')
    if block.coach_name:
        parts.append(_coach(block))

    body = f'<div class="container">{"".join(parts)}</div>'
    return section(body, "py-20 program-detail", block.block_name)
