"""Unit tests for the StreamChatPlatformService class."""

import unittest
from unittest.mock import MagicMock, Mock, patch

from stream_chat import StreamChat

from chat_relay.conf.config import Config
from chat_relay.src.services.chat_platform import StreamChatPlatformService, channel_id_for


class TestStreamChatPlatformService(unittest.TestCase):
    """Test cases for the Stream Chat adapter."""

    def setUp(self) -> None:
        """Set up test fixtures before each test method."""
        self.mock_client = Mock(spec=StreamChat)
        self.service = StreamChatPlatformService(client=self.mock_client)

    def test_channel_id_for(self) -> None:
        self.assertEqual(channel_id_for("ann_example_com"), "chat-ann_example_com")

    def test_user_exists(self) -> None:
        self.mock_client.query_users.return_value = {"users": [{"id": "u1"}]}

        self.assertTrue(self.service.user_exists("u1"))
        self.mock_client.query_users.assert_called_once_with({"id": {"$eq": "u1"}})

    def test_user_missing(self) -> None:
        self.mock_client.query_users.return_value = {"users": []}

        self.assertFalse(self.service.user_exists("u1"))

    def test_upsert_user(self) -> None:
        self.service.upsert_user("u1", "Ann", "ann@example.com")

        self.mock_client.upsert_user.assert_called_once_with(
            {"id": "u1", "name": "Ann", "email": "ann@example.com", "role": "user"}
        )

    def test_deliver_creates_channel_and_sends(self) -> None:
        mock_channel = MagicMock()
        self.mock_client.channel.return_value = mock_channel

        self.service.deliver("u1", "Hello from the bot")

        self.mock_client.channel.assert_called_once_with(
            "messaging", "chat-u1", {"name": "AI Chat", "created_by_id": "ai_bot"}
        )
        mock_channel.create.assert_called_once_with("ai_bot")
        mock_channel.send_message.assert_called_once_with(
            {"text": "Hello from the bot"}, "deepseek_bot"
        )

    def test_deliver_send_failure_propagates(self) -> None:
        mock_channel = MagicMock()
        mock_channel.send_message.side_effect = RuntimeError("rate limited")
        self.mock_client.channel.return_value = mock_channel

        with self.assertRaises(RuntimeError):
            self.service.deliver("u1", "Hello")

    def test_missing_credentials(self) -> None:
        with patch.object(Config, "STREAM_API_KEY", None):
            with self.assertRaises(ValueError):
                StreamChatPlatformService()


if __name__ == "__main__":
    unittest.main()
