"""Unit tests for identity derivation and the IdentityService class."""

import unittest
from unittest.mock import Mock

from chat_relay.src.data_classes import UserIdentity
from chat_relay.src.services.chat_platform import BaseChatPlatformService
from chat_relay.src.services.identity import IdentityService, derive_identifier
from chat_relay.tests.helpers import in_memory_persistence


class TestDeriveIdentifier(unittest.TestCase):
    """Test cases for derive_identifier."""

    def test_replaces_unsafe_characters(self) -> None:
        self.assertEqual(derive_identifier("ann.lee+ai@example.com"), "ann_lee_ai_example_com")

    def test_safe_characters_unchanged(self) -> None:
        for email in ["ann", "Ann_Lee-01", "a-b_c"]:
            with self.subTest(email=email):
                self.assertEqual(derive_identifier(email), email)

    def test_deterministic(self) -> None:
        email = "Bob Smith@mail.example.org"
        self.assertEqual(derive_identifier(email), derive_identifier(email))
        self.assertEqual(
            derive_identifier(derive_identifier(email)), derive_identifier(email)
        )

    def test_non_ascii_replaced(self) -> None:
        self.assertEqual(derive_identifier("zo\u00eb@x.io"), "zo__x_io")

    def test_empty_string(self) -> None:
        self.assertEqual(derive_identifier(""), "")


class TestUserIdentity(unittest.TestCase):
    """Test cases for the UserIdentity data class."""

    def test_to_json_uses_public_keys(self) -> None:
        identity = UserIdentity(user_id="ann_example_com", name="Ann", email="ann@example.com")

        self.assertEqual(
            identity.to_json(),
            {"userId": "ann_example_com", "name": "Ann", "email": "ann@example.com"},
        )


class TestIdentityService(unittest.TestCase):
    """Test cases for the IdentityService class."""

    def setUp(self) -> None:
        """Set up test fixtures before each test method."""
        self.mock_platform = Mock(spec=BaseChatPlatformService)
        self.persistence = in_memory_persistence()
        self.service = IdentityService(
            chat_platform=self.mock_platform, persistence=self.persistence
        )

    def test_register_new_user(self) -> None:
        self.mock_platform.user_exists.return_value = False

        identity = self.service.register("Ann", "ann@example.com")

        self.assertEqual(
            identity,
            UserIdentity(user_id="ann_example_com", name="Ann", email="ann@example.com"),
        )
        self.mock_platform.user_exists.assert_called_once_with("ann_example_com")
        self.mock_platform.upsert_user.assert_called_once_with(
            "ann_example_com", "Ann", "ann@example.com"
        )
        self.assertIsNotNone(self.persistence.get_user("ann_example_com"))

    def test_register_twice_is_idempotent(self) -> None:
        """A second registration neither raises nor creates another row."""
        self.mock_platform.user_exists.side_effect = [False, True]

        first = self.service.register("Ann", "ann@example.com")
        second = self.service.register("Ann", "ann@example.com")

        self.assertEqual(first, second)
        self.mock_platform.upsert_user.assert_called_once()
        self.assertFalse(
            self.persistence.insert_user_if_missing("ann_example_com", "Ann", "ann@example.com")
        )

    def test_register_completes_missing_store_row(self) -> None:
        """A user known to the platform but not the store is added to the store."""
        self.mock_platform.user_exists.return_value = True

        self.service.register("Ann", "ann@example.com")

        self.mock_platform.upsert_user.assert_not_called()
        self.assertIsNotNone(self.persistence.get_user("ann_example_com"))

    def test_register_platform_failure_propagates(self) -> None:
        self.mock_platform.user_exists.side_effect = RuntimeError("platform down")

        with self.assertRaises(RuntimeError):
            self.service.register("Ann", "ann@example.com")
        self.assertIsNone(self.persistence.get_user("ann_example_com"))

    def test_exists_requires_both_sides(self) -> None:
        self.persistence.insert_user_if_missing("ann_example_com", "Ann", "ann@example.com")

        self.mock_platform.user_exists.return_value = True
        self.assertTrue(self.service.exists("ann_example_com"))

        self.mock_platform.user_exists.return_value = False
        self.assertFalse(self.service.exists("ann_example_com"))

    def test_exists_false_when_store_missing(self) -> None:
        self.mock_platform.user_exists.return_value = True
        self.assertFalse(self.service.exists("ghost"))


if __name__ == "__main__":
    unittest.main()
