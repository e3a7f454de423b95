"""Unit tests for the ConversationAssembler class."""

import unittest
from unittest.mock import Mock

from chat_relay.conf.config import Config
from chat_relay.src.services.conversation import ConversationAssembler
from chat_relay.src.services.store import PersistenceService
from chat_relay.tests.helpers import in_memory_persistence


class TestConversationAssembler(unittest.TestCase):
    """Test cases for building LLM context from stored exchanges."""

    def setUp(self) -> None:
        """Set up test fixtures before each test method."""
        self.persistence = in_memory_persistence()
        self.assembler = ConversationAssembler(persistence=self.persistence, window_size=10)

    def _store_exchanges(self, user_id: str, count: int) -> None:
        for i in range(count):
            self.persistence.insert_exchange(user_id, f"question {i}", f"answer {i}")

    def test_no_history(self) -> None:
        """Without history only the new message is sent."""
        messages = self.assembler.build_context("u1", "Hello")

        self.assertEqual(messages, [{"role": "user", "content": "Hello"}])

    def test_history_interleaves_roles(self) -> None:
        self._store_exchanges("u1", 2)

        messages = self.assembler.build_context("u1", "Next")

        self.assertEqual(
            messages,
            [
                {"role": "user", "content": "question 0"},
                {"role": "assistant", "content": "answer 0"},
                {"role": "user", "content": "question 1"},
                {"role": "assistant", "content": "answer 1"},
                {"role": "user", "content": "Next"},
            ],
        )

    def test_other_users_history_ignored(self) -> None:
        self._store_exchanges("u2", 3)

        messages = self.assembler.build_context("u1", "Hello")

        self.assertEqual(len(messages), 1)

    def test_window_with_twelve_exchanges(self) -> None:
        """Twelve stored exchanges yield a context of the ten oldest ones."""
        self._store_exchanges("u1", 12)

        messages = self.assembler.build_context("u1", "New")

        self.assertEqual(len(messages), 21)
        questions = [m["content"] for m in messages[:-1:2]]
        answers = [m["content"] for m in messages[1:-1:2]]
        self.assertEqual(questions, [f"question {i}" for i in range(10)])
        self.assertEqual(answers, [f"answer {i}" for i in range(10)])
        self.assertEqual(messages[-1], {"role": "user", "content": "New"})

    def test_uses_configured_window(self) -> None:
        mock_persistence = Mock(spec=PersistenceService)
        mock_persistence.recent_exchanges.return_value = []
        assembler = ConversationAssembler(persistence=mock_persistence, window_size=4)

        assembler.build_context("u1", "Hi")

        mock_persistence.recent_exchanges.assert_called_once_with("u1", 4)

    def test_zero_window_sends_only_new_message(self) -> None:
        self._store_exchanges("u1", 3)
        assembler = ConversationAssembler(persistence=self.persistence, window_size=0)

        self.assertEqual(assembler.window_size, 0)
        self.assertEqual(
            assembler.build_context("u1", "Hi"), [{"role": "user", "content": "Hi"}]
        )

    def test_default_window_from_config(self) -> None:
        assembler = ConversationAssembler(persistence=self.persistence)

        self.assertEqual(assembler.window_size, Config.CONTEXT_WINDOW_SIZE)

    def test_store_error_propagates(self) -> None:
        mock_persistence = Mock(spec=PersistenceService)
        mock_persistence.recent_exchanges.side_effect = RuntimeError("db down")
        assembler = ConversationAssembler(persistence=mock_persistence)

        with self.assertRaises(RuntimeError):
            assembler.build_context("u1", "Hi")


if __name__ == "__main__":
    unittest.main()
