"""
Lead Submissions URL Configuration
"""
from django.urls import path
from .views import SubmissionView

app_name = 'submissions'

# Public URLs (no auth required)
urlpatterns = [
    path('', SubmissionView.as_view(), name='submit'),
]
