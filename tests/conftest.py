"""
pytest configuration.

Puts the project root on sys.path so tests import ``main`` and
``technique_library`` without an install, and provides stand-ins for the
Telegram objects the handlers receive.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def command_update():
    """Update for a typed command or message (no callback query)."""
    update = MagicMock()
    update.callback_query = None
    update.message.reply_text = AsyncMock()
    update.message.reply_document = AsyncMock()
    update.message.text = ""
    return update


@pytest.fixture
def make_callback_update():
    """Factory for an update carrying an inline button press."""

    def _make(data):
        update = MagicMock()
        update.callback_query.data = data
        update.callback_query.answer = AsyncMock()
        update.callback_query.edit_message_text = AsyncMock()
        update.callback_query.message.reply_text = AsyncMock()
        return update

    return _make


@pytest.fixture
def context():
    ctx = MagicMock()
    ctx.user_data = {}
    ctx.args = []
    return ctx


def keyboard_callbacks(reply_markup):
    """All callback_data values in an InlineKeyboardMarkup, in order."""
    return [
        button.callback_data
        for row in reply_markup.inline_keyboard
        for button in row
        if button.callback_data is not None
    ]
