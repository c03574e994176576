from backend.app.security import hash_password, verify_password


def test_hash_and_verify():
    stored = hash_password("s3cret")
    assert "$" in stored
    assert verify_password("s3cret", stored)
    assert not verify_password("wrong", stored)


def test_salted():
    assert hash_password("same") != hash_password("same")


def test_malformed_stored_hash():
    assert not verify_password("x", "no-separator")
    assert not verify_password("x", None)
