"""Authentication.

Learn: One authentication path:
    email/password → bcrypt verify → signed JWT bearer token (1 hour)

Protected routes depend on get_current_user_id, which reads the
Authorization header and yields the token's subject. That id is the only
source of "who is asking". Request bodies never carry it.
Tokens are stateless: there is no session table and no revocation list.
"""
