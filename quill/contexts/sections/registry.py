"""
Section Registry

Ordering and visibility operations over a resume's section list.

Every operation is pure: the input list and its Section objects are left
untouched and a new list of new Section objects is returned. Inputs may be
Section models or wire dicts (editor state); outputs are always Section models.

`order` is a sort key, not an index. Values may have gaps or duplicates until
the next reorder(), which renormalizes them to 0..n-1.
"""

from typing import Any, Iterable, List, Mapping, Optional, Union

from quill.contexts.document.defaults import new_token
from quill.contexts.document.exceptions import FieldError, ResumeValidationError, SectionIndexError
from quill.contexts.document.resume_data_structure import Section, SectionType

SectionLike = Union[Section, Mapping[str, Any]]

SECTION_TITLE_REQUIRED = "Section title is required"


def _as_sections(sections: Iterable[SectionLike]) -> List[Section]:
    """Copy inputs into fresh Section models."""
    copied = []
    for section in sections:
        if isinstance(section, Section):
            copied.append(section.model_copy(deep=True))
        else:
            copied.append(Section.model_validate(dict(section)))
    return copied


def sort_sections(sections: Iterable[SectionLike]) -> List[Section]:
    """
    Sort sections by `order` ascending.

    Python's sort is stable, so ties keep their original array position.
    """
    return sorted(_as_sections(sections), key=lambda section: section.order)


def visible_sections(sections: Iterable[SectionLike]) -> List[Section]:
    """Sections in display order, restricted to those marked visible."""
    return [section for section in sort_sections(sections) if section.visible is True]


def find_section(sections: Iterable[SectionLike], section_id: str) -> Optional[Section]:
    """Section with the given id, or None."""
    for section in _as_sections(sections):
        if section.id == section_id:
            return section
    return None


def reorder(sections: Iterable[SectionLike], from_index: int, to_index: int) -> List[Section]:
    """
    Move one section within the display order.

    Indices refer to the order-sorted view (what the user sees), not the
    underlying array. After the move every section's `order` is rewritten
    to its new position, so the result is always dense 0..n-1.

    Args:
        sections: Current sections
        from_index: Position of the section to move in the sorted view
        to_index: Position it should end up at

    Returns:
        New list in display order with renormalized `order` values

    Raises:
        SectionIndexError: If either index is outside 0..n-1
    """
    ordered = sort_sections(sections)

    for name, index in (("fromIndex", from_index), ("toIndex", to_index)):
        if not 0 <= index < len(ordered):
            raise SectionIndexError(
                f"Section index out of range: {index}",
                [FieldError(path=name, message=f"must be between 0 and {len(ordered) - 1}")],
            )

    moved = ordered.pop(from_index)
    ordered.insert(to_index, moved)

    return [section.model_copy(update={"order": position}) for position, section in enumerate(ordered)]


def toggle_visibility(sections: Iterable[SectionLike], section_id: str) -> List[Section]:
    """
    Flip `visible` on the section with the given id.

    Array position and `order` are unchanged. An unknown id returns an
    equal copy of the input.
    """
    return [
        section.model_copy(update={"visible": not section.visible}) if section.id == section_id else section
        for section in _as_sections(sections)
    ]


def append_custom_section(sections: Iterable[SectionLike], title: Optional[str]) -> List[Section]:
    """
    Append an empty, visible custom section.

    The new section gets a fresh id and `order` equal to the current section
    count, so it lands last unless earlier orders have gaps or duplicates.

    Raises:
        ResumeValidationError: "Section title is required" for a missing,
            empty or whitespace-only title
    """
    current = _as_sections(sections)

    if not isinstance(title, str) or not title.strip():
        raise ResumeValidationError(
            SECTION_TITLE_REQUIRED, [FieldError(path="title", message=SECTION_TITLE_REQUIRED)]
        )

    new_section = Section(
        id=new_token(),
        title=title,
        type=SectionType.CUSTOM.value,
        content="",
        visible=True,
        order=len(current),
    )
    return current + [new_section]


def update_custom_content(sections: Iterable[SectionLike], section_id: str, content: str) -> List[Section]:
    """
    Replace the free text of a custom section.

    Raises:
        ResumeValidationError: If the id does not name a custom section
    """
    current = _as_sections(sections)
    target = next((section for section in current if section.id == section_id), None)

    if target is None or not target.is_custom:
        raise ResumeValidationError(
            "Only custom sections have editable content",
            [FieldError(path="sections", message=f"no custom section with id {section_id}")],
        )

    return [
        section.model_copy(update={"content": content}) if section.id == section_id else section
        for section in current
    ]


def remove_section(sections: Iterable[SectionLike], section_id: str) -> List[Section]:
    """
    Remove a custom section. Remaining `order` values are left as they are.

    Raises:
        ResumeValidationError: If the id names a built-in section
    """
    current = _as_sections(sections)
    target = next((section for section in current if section.id == section_id), None)

    if target is None:
        return current

    if not target.is_custom:
        raise ResumeValidationError(
            "Built-in sections cannot be removed",
            [FieldError(path="sections", message=f"section {section_id} is a built-in {target.type} section")],
        )

    return [section for section in current if section.id != section_id]
