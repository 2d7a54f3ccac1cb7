"""Password hashing tests."""

from postboard.auth.password import hash_password, verify_password

ROUNDS = 4


def test_verify_accepts_own_hash():
    digest = hash_password("secret1", rounds=ROUNDS)
    assert digest.startswith("$2")
    assert verify_password("secret1", digest) is True


def test_verify_rejects_other_password():
    digest = hash_password("secret1", rounds=ROUNDS)
    assert verify_password("secret2", digest) is False
    assert verify_password("", digest) is False


def test_same_password_gets_fresh_salt():
    """Hashing twice gives two digests, both of which verify."""
    a = hash_password("secret1", rounds=ROUNDS)
    b = hash_password("secret1", rounds=ROUNDS)
    assert a != b
    assert verify_password("secret1", a)
    assert verify_password("secret1", b)


def test_malformed_digest_returns_false():
    assert verify_password("secret1", "not-a-bcrypt-hash") is False
    assert verify_password("secret1", "") is False


def test_no_length_policy_at_this_layer():
    """Short passwords hash fine; the request schema enforces the minimum."""
    digest = hash_password("a", rounds=ROUNDS)
    assert verify_password("a", digest)


def test_unicode_password():
    digest = hash_password("pässwörd-ü", rounds=ROUNDS)
    assert verify_password("pässwörd-ü", digest)
    assert not verify_password("passwort-u", digest)
