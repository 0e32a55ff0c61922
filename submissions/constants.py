"""
Submission Constants

Form types, destination tables and response headers shared by the
submission pipeline.
"""
import re

FORM_FAMILY = 'family'
FORM_DONOR = 'donor'
FORM_COLLABORATOR = 'collaborator'

FORM_TYPES = (FORM_FAMILY, FORM_DONOR, FORM_COLLABORATOR)

TABLE_FAMILIES = 'families'
TABLE_DONORS = 'donors'
TABLE_COLLABORATORS = 'collaborators'

# Column order is the positional parameter order of each insert
TABLE_COLUMNS = {
    TABLE_FAMILIES: ('name', 'email', 'region', 'interest'),
    TABLE_DONORS: ('name', 'email', 'focus', 'message'),
    TABLE_COLLABORATORS: ('name', 'email', 'expertise', 'idea'),
}

EMAIL_MAX_LENGTH = 320
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

# Payload keys for the Turnstile token, current name first
TOKEN_FIELD = 'turnstileToken'
LEGACY_TOKEN_FIELD = 'cf-turnstile-response'

JSON_CONTENT_TYPE = 'application/json; charset=utf-8'

BASE_CORS_HEADERS = {
    'Access-Control-Allow-Methods': 'POST,OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Max-Age': '86400',
    'Vary': 'Origin',
}

FORM_TABLES = {
    FORM_FAMILY: TABLE_FAMILIES,
    FORM_DONOR: TABLE_DONORS,
    FORM_COLLABORATOR: TABLE_COLLABORATORS,
}
