"""
Lead Submissions App

Accepts contact submissions from the public site's three pilot forms:
- Families interested in the programme
- Donors and funding partners
- Collaborators offering expertise or ideas

Features:
- Origin allow-list and CORS headers for the static site
- Cloudflare Turnstile verification before any field is trusted
- Per-form field sanitization with aggregated error messages
- One parameterized insert per accepted submission
"""
