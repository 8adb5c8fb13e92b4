from resource_hub.features.auth.utils.security import generate_otp, hash_password, verify_password


def test_generate_otp_is_six_digits():
    for _ in range(200):
        code = generate_otp()
        assert len(code) == 6
        assert code.isdigit()
        assert 100000 <= int(code) <= 999999


def test_generate_otp_varies():
    assert len({generate_otp() for _ in range(50)}) > 1


def test_hash_password_is_salted():
    first = hash_password("pw123456")
    second = hash_password("pw123456")

    assert first != second
    assert first != "pw123456"


def test_verify_password():
    hashed = hash_password("pw123456")

    assert verify_password("pw123456", hashed) is True
    assert verify_password("wrong-password", hashed) is False


def test_long_passwords_are_not_truncated():
    base = "x" * 80
    hashed = hash_password(base + "a")

    assert verify_password(base + "a", hashed) is True
    assert verify_password(base + "b", hashed) is False
