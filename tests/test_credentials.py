import pytest

from siege_api.auth import Credentials

pytestmark = pytest.mark.unit


class TestBasicToken:
    def test_short_pair_is_encoded_without_padding(self):
        assert Credentials("abc", "123").derive_basic_token() == "YWJjOjEyMw"

    def test_email_and_password(self):
        credentials = Credentials("jomahebam.redafapap@rungel.net", "4pVo9!9^D8BU4zet")

        assert (
            credentials.derive_basic_token()
            == "am9tYWhlYmFtLnJlZGFmYXBhcEBydW5nZWwubmV0OjRwVm85ITleRDhCVTR6ZXQ"
        )

    def test_uses_url_safe_alphabet(self):
        # "?>?" encodes to "Pz4/" in the standard alphabet
        token = Credentials("?>?", "").derive_basic_token()

        assert "/" not in token and "+" not in token
        assert token == "Pz4_Og"

    @pytest.mark.parametrize(
        "username,password",
        [("abc", "123"), ("", ""), ("user@example.com", "pässwörd"), ("a:b", "c")],
    )
    def test_same_inputs_give_same_token(self, username, password):
        first = Credentials(username, password).derive_basic_token()
        second = Credentials(username, password).derive_basic_token()

        assert first == second

    def test_authorization_header(self):
        assert Credentials("abc", "123").authorization_header() == "Basic YWJjOjEyMw"


def test_repr_never_shows_password():
    credentials = Credentials("abc", "hunter2")

    assert "hunter2" not in repr(credentials)
    assert "abc" in repr(credentials)


def test_from_settings(settings):
    credentials = Credentials.from_settings(settings)

    assert credentials == Credentials("u", "p")


def test_credentials_are_immutable():
    credentials = Credentials("abc", "123")

    with pytest.raises(AttributeError):
        credentials.password = "other"
