"""
Resume Validation

Pure functions that turn untrusted payloads into validated resume models:

- validate: full stored record -> Resume
- validate_draft: create payload -> ResumeDraft (identity fields stripped)
- merge_update: shallow top-level merge of an update payload over a stored Resume

All failures raise ResumeValidationError listing every offending field path.
"""

from typing import Any, Dict, List, Mapping

from pydantic import ValidationError

from quill.contexts.document.exceptions import FieldError, ResumeValidationError
from quill.contexts.document.resume_data_structure import (
    CLIENT_FIELDS,
    SERVER_ASSIGNED_FIELDS,
    Resume,
    ResumeDraft,
)


def _field_errors(error: ValidationError) -> List[FieldError]:
    """Flatten pydantic errors into dotted wire paths."""
    field_errors = []
    for detail in error.errors():
        path = ".".join(str(part) for part in detail["loc"]) or "<root>"
        field_errors.append(FieldError(path=path, message=detail["msg"]))
    return field_errors


def _require_mapping(candidate: Any) -> None:
    if not isinstance(candidate, Mapping):
        raise ResumeValidationError(
            "Resume payload must be an object",
            [FieldError(path="<root>", message=f"expected an object, got {type(candidate).__name__}")],
        )


def validate(candidate: Mapping[str, Any]) -> Resume:
    """
    Validate a complete resume record.

    Args:
        candidate: Resume as a wire dict (camelCase keys)

    Returns:
        Validated Resume

    Raises:
        ResumeValidationError: If any required field is missing or malformed
    """
    _require_mapping(candidate)
    try:
        return Resume.model_validate(dict(candidate))
    except ValidationError as e:
        raise ResumeValidationError("Invalid resume", _field_errors(e)) from e


def strip_server_fields(candidate: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop id/userId/createdAt/updatedAt (and their snake_case spellings) from client input."""
    server_names = set(SERVER_ASSIGNED_FIELDS) | {"user_id", "created_at", "updated_at"}
    return {key: value for key, value in candidate.items() if key not in server_names}


def validate_draft(candidate: Mapping[str, Any]) -> ResumeDraft:
    """
    Validate a create payload.

    Server-assigned identity fields are stripped before validation, so a
    client-supplied id, userId, createdAt or updatedAt never reaches the store.

    Args:
        candidate: Resume content as a wire dict

    Returns:
        Validated ResumeDraft

    Raises:
        ResumeValidationError: If any required field is missing or malformed
    """
    _require_mapping(candidate)
    try:
        return ResumeDraft.model_validate(strip_server_fields(candidate))
    except ValidationError as e:
        raise ResumeValidationError("Invalid resume", _field_errors(e)) from e


def merge_update(stored: Resume, patch: Mapping[str, Any], updated_at: str) -> Resume:
    """
    Apply an update payload to a stored resume.

    The merge is shallow: every top-level client field present in the patch
    replaces the stored value wholesale. Nested objects are not merged, so
    updating personalInfo requires sending the complete object. Identity
    fields and unknown keys in the patch are ignored.

    The merged record is validated as a whole before it is returned, so an
    invalid patch is never partially applied.

    Args:
        stored: Current stored resume (not modified)
        patch: Partial resume as a wire dict
        updated_at: New updatedAt timestamp

    Returns:
        New validated Resume

    Raises:
        ResumeValidationError: If the patch is not an object or the merged record is invalid
    """
    _require_mapping(patch)

    merged = stored.model_dump(by_alias=True)
    for key, value in patch.items():
        if key in CLIENT_FIELDS:
            merged[key] = value
    merged["updatedAt"] = updated_at

    return validate(merged)


def changed_fields(patch: Mapping[str, Any]) -> List[str]:
    """Client fields an update payload will overwrite, in payload order."""
    return [key for key in patch if key in CLIENT_FIELDS]
