"""Postboard — a small content-sharing backend.

Accounts, authored posts, threaded comments, and likes behind a JSON API.
The interesting part is the access-control layer every write passes
through: bcrypt credentials, signed bearer tokens, and ownership-scoped
mutation.
"""

__version__ = "0.1.0"
