"""
Submission Serializers

Per-form field sanitization. Every field is checked and all problems are
reported together, so a visitor can fix the whole form in one pass.
"""
from typing import List, NamedTuple, Optional

from rest_framework import serializers

from .constants import (
    EMAIL_MAX_LENGTH,
    EMAIL_PATTERN,
    FORM_COLLABORATOR,
    FORM_DONOR,
    FORM_FAMILY,
    TABLE_COLLABORATORS,
    TABLE_COLUMNS,
    TABLE_DONORS,
    TABLE_FAMILIES,
)


class SanitizedTextField(serializers.Field):
    """
    Trimmed text field that never rejects a value for its type.

    Anything that is not a string (including a missing key) is treated as an
    empty string, so required/length checks produce the visitor-facing
    messages instead of DRF's generic ones. Empty optional values become None.
    """

    def __init__(self, max_length=None, **kwargs):
        self.max_length = max_length
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        # Missing and null values go through to_internal_value like any other
        return (False, data)

    def clean(self, data):
        return data.strip() if isinstance(data, str) else ''

    def collect_errors(self, value) -> List[str]:
        errors = []
        if self.required and not value:
            errors.append(f'{self.label} is required.')
        if self.max_length and len(value) > self.max_length:
            errors.append(f'{self.label} must be fewer than {self.max_length} characters.')
        return errors

    def to_internal_value(self, data):
        value = self.clean(data)
        errors = self.collect_errors(value)
        if errors:
            raise serializers.ValidationError(errors)
        return value or None

    def to_representation(self, value):
        return value


class SanitizedEmailField(SanitizedTextField):
    """Email has its own checks: required, shape, then length."""

    def __init__(self, **kwargs):
        kwargs.setdefault('label', 'Email')
        kwargs.setdefault('required', True)
        kwargs.setdefault('max_length', EMAIL_MAX_LENGTH)
        super().__init__(**kwargs)

    def collect_errors(self, value) -> List[str]:
        if not value:
            return [f'{self.label} is required.']

        errors = []
        if not EMAIL_PATTERN.match(value):
            errors.append(f'{self.label} must be a valid address.')
        if len(value) > self.max_length:
            errors.append(f'{self.label} must be fewer than {self.max_length} characters.')
        return errors


class SubmissionSerializer(serializers.Serializer):
    """
    Base serializer for the pilot forms.

    Subclasses set ``table``; field declaration order must match the table's
    column order in ``TABLE_COLUMNS``.
    """

    table = None

    def get_parameters(self):
        """Validated values in insert order."""
        return [self.validated_data.get(column) for column in TABLE_COLUMNS[self.table]]

    def get_error_message(self):
        """All field errors, in field order, as one space-separated string."""
        messages = []
        for field_errors in self.errors.values():
            messages.extend(str(error) for error in field_errors)
        return ' '.join(messages)


class FamilySubmissionSerializer(SubmissionSerializer):
    table = TABLE_FAMILIES

    name = SanitizedTextField(label='Name', required=True)
    email = SanitizedEmailField()
    region = SanitizedTextField(label='City / Region', required=True)
    interest = SanitizedTextField(label='Interest', required=False, max_length=1000)


class DonorSubmissionSerializer(SubmissionSerializer):
    table = TABLE_DONORS

    name = SanitizedTextField(label='Name / Organization', required=True)
    email = SanitizedEmailField()
    focus = SanitizedTextField(label='Focus area', required=False, max_length=500)
    message = SanitizedTextField(label='Message', required=False, max_length=1500)


class CollaboratorSubmissionSerializer(SubmissionSerializer):
    table = TABLE_COLLABORATORS

    name = SanitizedTextField(label='Name / Organization', required=True)
    email = SanitizedEmailField()
    expertise = SanitizedTextField(label='Expertise', required=False, max_length=500)
    idea = SanitizedTextField(label='Idea', required=False, max_length=1500)


SUBMISSION_SERIALIZERS = {
    FORM_FAMILY: FamilySubmissionSerializer,
    FORM_DONOR: DonorSubmissionSerializer,
    FORM_COLLABORATOR: CollaboratorSubmissionSerializer,
}


class SubmissionResult(NamedTuple):
    success: bool
    table: Optional[str] = None
    parameters: Optional[list] = None
    error: Optional[str] = None


def validate_submission(form_type, data) -> SubmissionResult:
    """
    Sanitize ``data`` for ``form_type``.

    Returns the destination table and insert parameters on success, or the
    joined error message on failure.
    """
    serializer_class = SUBMISSION_SERIALIZERS.get(form_type)
    if serializer_class is None:
        return SubmissionResult(False, error='Unsupported form type.')

    serializer = serializer_class(data=data)
    if not serializer.is_valid():
        return SubmissionResult(False, error=serializer.get_error_message())

    return SubmissionResult(
        True,
        table=serializer.table,
        parameters=serializer.get_parameters(),
    )
