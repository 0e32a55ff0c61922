"""
Tests for the submission insert statements.
"""
import pytest
from unittest.mock import MagicMock, patch
from django.db import OperationalError

from submissions.models import CollaboratorSubmission, DonorSubmission, FamilySubmission
from submissions.services import (
    SubmissionStorageError,
    get_insert_statement,
    record_submission,
)


class TestInsertStatements:

    def test_statements_match_columns(self):
        assert get_insert_statement('families') == (
            'INSERT INTO families (name, email, region, interest) VALUES (%s, %s, %s, %s)'
        )
        assert get_insert_statement('donors') == (
            'INSERT INTO donors (name, email, focus, message) VALUES (%s, %s, %s, %s)'
        )
        assert get_insert_statement('collaborators') == (
            'INSERT INTO collaborators (name, email, expertise, idea) VALUES (%s, %s, %s, %s)'
        )

    def test_unknown_table(self):
        with pytest.raises(ValueError):
            get_insert_statement('volunteers')


@pytest.mark.django_db
class TestRecordSubmission:

    def test_family_row(self):
        record_submission('families', ['Ama', 'ama@example.com', 'Accra', None])

        family = FamilySubmission.objects.get()
        assert family.region == 'Accra'
        assert family.interest is None

    def test_donor_row(self):
        record_submission('donors', ['Sunrise', 'grants@sunrise.org', None, 'Hello'])

        donor = DonorSubmission.objects.get()
        assert donor.focus is None
        assert donor.message == 'Hello'

    def test_collaborator_row(self):
        record_submission('collaborators', ['Kwame', 'kwame@studio.dev', 'Design', 'Pilot'])

        assert CollaboratorSubmission.objects.filter(expertise='Design', idea='Pilot').exists()


class TestRecordSubmissionFailure:

    @patch('submissions.services.connection')
    def test_database_error_is_wrapped(self, mock_connection):
        cursor = MagicMock()
        cursor.execute.side_effect = OperationalError('database is locked')
        mock_connection.cursor.return_value.__enter__.return_value = cursor

        with pytest.raises(SubmissionStorageError):
            record_submission('donors', ['Sunrise', 'grants@sunrise.org', None, None])

        cursor.execute.assert_called_once_with(
            'INSERT INTO donors (name, email, focus, message) VALUES (%s, %s, %s, %s)',
            ['Sunrise', 'grants@sunrise.org', None, None]
        )
