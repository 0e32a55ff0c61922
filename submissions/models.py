"""
Lead Submission Models

Database schema for the three pilot forms. Rows are written once by
``submissions.services.record_submission`` and never updated.
"""
from django.db import models
from django.db.models.functions import Now

from .constants import EMAIL_MAX_LENGTH, TABLE_COLLABORATORS, TABLE_DONORS, TABLE_FAMILIES


class SubmissionBase(models.Model):
    """Fields shared by every form."""

    name = models.TextField(
        help_text="Name of the person or organization"
    )

    email = models.CharField(
        max_length=EMAIL_MAX_LENGTH,
        help_text="Email address for follow-up"
    )

    # Filled by the database so the raw insert only carries form fields
    created_at = models.DateTimeField(
        db_default=Now(),
        db_index=True,
        help_text="When the submission was received"
    )

    class Meta:
        abstract = True
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} <{self.email}>"


class FamilySubmission(SubmissionBase):
    """Families interested in joining the programme."""

    region = models.TextField(
        help_text="City or region the family lives in"
    )

    interest = models.TextField(
        null=True,
        blank=True,
        help_text="What the family is hoping for"
    )

    class Meta(SubmissionBase.Meta):
        db_table = TABLE_FAMILIES
        verbose_name = 'Family Submission'
        verbose_name_plural = 'Family Submissions'


class DonorSubmission(SubmissionBase):
    """Donors and funding partners."""

    focus = models.TextField(
        null=True,
        blank=True,
        help_text="Area the donor would like to support"
    )

    message = models.TextField(
        null=True,
        blank=True,
        help_text="Free-form message"
    )

    class Meta(SubmissionBase.Meta):
        db_table = TABLE_DONORS
        verbose_name = 'Donor Submission'
        verbose_name_plural = 'Donor Submissions'


class CollaboratorSubmission(SubmissionBase):
    """Collaborators offering expertise or ideas."""

    expertise = models.TextField(
        null=True,
        blank=True,
        help_text="Skills or domain the collaborator brings"
    )

    idea = models.TextField(
        null=True,
        blank=True,
        help_text="Proposal or idea"
    )

    class Meta(SubmissionBase.Meta):
        db_table = TABLE_COLLABORATORS
        verbose_name = 'Collaborator Submission'
        verbose_name_plural = 'Collaborator Submissions'
