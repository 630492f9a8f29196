import pytest

from src.pointage_system.pointage_system.auth.service import AuthService
from src.pointage_system.pointage_system.core.exceptions import AuthenticationError


def test_fixed_credentials_accepted():
    assert AuthService("admin", "1234").authenticate("admin", "1234").username == "admin"


@pytest.mark.parametrize("username,password", [("admin", "wrong"), ("root", "1234"), ("", ""), (None, None)])
def test_wrong_credentials_raise(username, password):
    with pytest.raises(AuthenticationError):
        AuthService("admin", "1234").authenticate(username, password)
