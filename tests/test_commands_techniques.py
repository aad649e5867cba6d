"""
Unit tests for the Telegram technique handlers.
"""

import json

import pytest
from telegram.error import BadRequest
from telegram.ext import ConversationHandler

from conftest import keyboard_callbacks
from technique_library.catalog import TECHNIQUES, get_technique_by_id
from technique_library.commands_techniques import (
    callback_data,
    export_command,
    library_command,
    search_command,
    search_receive_text,
    state_search_waiting,
    technique_callback,
    technique_card_text,
    technique_command,
    technique_mentions,
)
from technique_library.config import CALLBACK_DATA_LIMIT
from technique_library.models import Category, Difficulty, Technique


def _edit_kwargs(update):
    update.callback_query.edit_message_text.assert_awaited_once()
    call = update.callback_query.edit_message_text.call_args
    return call.args[0], call.kwargs.get("reply_markup")


def _reply_kwargs(update):
    update.message.reply_text.assert_awaited_once()
    call = update.message.reply_text.call_args
    return call.args[0], call.kwargs.get("reply_markup")


class TestCallbackData:

    def test_joins_parts(self) -> None:
        assert callback_data("techcat", "guard-pass", "all", 2) == "techcat_guard-pass_all_2"

    def test_rejects_oversized_payload(self) -> None:
        with pytest.raises(ValueError):
            callback_data("techitem", "x" * CALLBACK_DATA_LIMIT)

    def test_every_technique_id_fits(self) -> None:
        for technique in TECHNIQUES:
            assert "_" not in technique.id
            callback_data("techitem", technique.id)


class TestTechniqueCard:

    def test_card_shows_record_fields(self) -> None:
        text = technique_card_text(get_technique_by_id("heel-hook"))

        assert "*Heel Hook*" in text
        assert "advanced" in text
        assert "legal in: no-gi" in text
        assert "Brown belt and above" in text
        assert "*key points:*" in text

    def test_points_only_when_scored(self) -> None:
        armbar_lines = technique_card_text(get_technique_by_id("armbar")).splitlines()
        mount_lines = technique_card_text(get_technique_by_id("mount-position")).splitlines()

        assert get_technique_by_id("armbar").points == 0
        assert not any(line.startswith("points:") for line in armbar_lines)
        assert "points: +4" in mount_lines

    def test_record_text_is_escaped_for_markdown(self) -> None:
        technique = Technique(
            id="snake-choke",
            name="Snake_Choke",
            category=Category.SUBMISSION,
            difficulty=Difficulty.ADVANCED,
            description="Grip the *far* lapel",
            gi_legal=True,
            no_gi_legal=False,
            key_points=("Use the [collar]",),
            belt_restrictions="Black_belt only",
        )

        text = technique_card_text(technique)

        assert "*Snake\\_Choke*" in text
        assert "Grip the \\*far\\* lapel" in text
        assert "1. Use the \\[collar]" in text
        assert "Black\\_belt only" in text


class TestTechniqueCommand:

    @pytest.mark.asyncio
    async def test_lists_categories(self, command_update, context) -> None:
        await technique_command(command_update, context)

        text, markup = _reply_kwargs(command_update)
        assert f"({len(TECHNIQUES)} techniques)" in text
        assert keyboard_callbacks(markup)[0] == "techcat_submission_all_1"

    @pytest.mark.asyncio
    async def test_library_stats(self, command_update, context) -> None:
        await library_command(command_update, context)

        text, _ = _reply_kwargs(command_update)
        assert f"*{len(TECHNIQUES)}* techniques" in text
        assert "fundamental (white belt): 44" in text


class TestTechniqueCallback:

    @pytest.mark.asyncio
    async def test_opens_card_with_related_buttons(self, make_callback_update, context) -> None:
        update = make_callback_update("techitem_armbar")

        await technique_callback(update, context)

        text, markup = _edit_kwargs(update)
        callbacks = keyboard_callbacks(markup)
        assert "*Armbar*" in text
        assert "techitem_triangle-choke" in callbacks
        assert "techitem_omoplata" in callbacks
        assert callbacks[-1] == "techcat_submission_all_1"

    @pytest.mark.asyncio
    async def test_dangling_related_ids_do_not_break_card(self, make_callback_update, context) -> None:
        update = make_callback_update("techitem_rnc")

        await technique_callback(update, context)

        _, markup = _edit_kwargs(update)
        assert keyboard_callbacks(markup) == ["techcat_submission_all_1"]

    @pytest.mark.asyncio
    async def test_unknown_technique_is_ignored(self, make_callback_update, context) -> None:
        update = make_callback_update("techitem_does-not-exist")

        await technique_callback(update, context)

        update.callback_query.answer.assert_awaited_once()
        update.callback_query.edit_message_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_category_with_difficulty_filter(self, make_callback_update, context) -> None:
        update = make_callback_update("techcat_submission_advanced_1")

        await technique_callback(update, context)

        text, markup = _edit_kwargs(update)
        assert "submissions · advanced" in text
        remembered = [get_technique_by_id(i) for i in context.user_data["last_results"]]
        assert remembered
        assert all(t.category == "submission" and t.difficulty == "advanced" for t in remembered)
        assert all(len(data) <= CALLBACK_DATA_LIMIT for data in keyboard_callbacks(markup))

    @pytest.mark.asyncio
    async def test_category_pages(self, make_callback_update, context) -> None:
        update = make_callback_update("techcat_submission_all_2")

        await technique_callback(update, context)

        text, markup = _edit_kwargs(update)
        callbacks = keyboard_callbacks(markup)
        assert "_page 2 of" in text
        assert "techcat_submission_all_1" in callbacks
        assert "techcat_submission_all_3" in callbacks

    @pytest.mark.asyncio
    async def test_unknown_category_is_ignored(self, make_callback_update, context) -> None:
        update = make_callback_update("techcat_strikes_all_1")

        await technique_callback(update, context)

        update.callback_query.edit_message_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_position(self, make_callback_update, context) -> None:
        update = make_callback_update("techpos_mount_1")

        await technique_callback(update, context)

        text, _ = _edit_kwargs(update)
        assert "from or into mount" in text
        assert "scissor-sweep" in context.user_data["last_results"]
        assert "ezekiel-choke" in context.user_data["last_results"]

    @pytest.mark.asyncio
    async def test_level(self, make_callback_update, context) -> None:
        update = make_callback_update("techlvl_advanced_1")

        await technique_callback(update, context)

        text, _ = _edit_kwargs(update)
        assert "advanced (brown-black belt)" in text
        assert len(context.user_data["last_results"]) == 16

    @pytest.mark.asyncio
    async def test_reselecting_active_filter_is_harmless(self, make_callback_update, context) -> None:
        update = make_callback_update("techcat_submission_all_1")
        update.callback_query.edit_message_text.side_effect = BadRequest(
            "Message is not modified: specified new message content and reply markup are exactly the same"
        )

        await technique_callback(update, context)

        update.callback_query.edit_message_text.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_other_edit_errors_propagate(self, make_callback_update, context) -> None:
        update = make_callback_update("techcat_submission_all_1")
        update.callback_query.edit_message_text.side_effect = BadRequest("Message to edit not found")

        with pytest.raises(BadRequest):
            await technique_callback(update, context)


class TestSearch:

    @pytest.mark.asyncio
    async def test_search_with_argument(self, command_update, context) -> None:
        context.args = ["juji"]

        state = await search_command(command_update, context)

        assert state == ConversationHandler.END
        text, markup = _reply_kwargs(command_update)
        assert "Armbar" in text
        assert "techitem_armbar" in keyboard_callbacks(markup)

    @pytest.mark.asyncio
    async def test_search_without_argument_asks(self, command_update, context) -> None:
        state = await search_command(command_update, context)

        assert state == state_search_waiting
        command_update.message.reply_text.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_search_receives_query(self, command_update, context) -> None:
        command_update.message.text = "  RNC "

        state = await search_receive_text(command_update, context)

        assert state == ConversationHandler.END
        assert context.user_data["search"]["query"] == "RNC"
        assert "rnc" in context.user_data["last_results"]

    @pytest.mark.asyncio
    async def test_difficulty_filter_narrows_search(self, make_callback_update, context) -> None:
        context.user_data["search"] = {"query": "choke", "category": "all", "difficulty": "all"}
        update = make_callback_update("techsf_diff_advanced")

        await technique_callback(update, context)

        results = [get_technique_by_id(i) for i in context.user_data["last_results"]]
        assert results
        assert all(t.difficulty == "advanced" for t in results)

    @pytest.mark.asyncio
    async def test_category_filter_narrows_search(self, make_callback_update, context) -> None:
        context.user_data["search"] = {"query": "guard", "category": "all", "difficulty": "all"}
        update = make_callback_update("techsf_cat_sweep")

        await technique_callback(update, context)

        results = [get_technique_by_id(i) for i in context.user_data["last_results"]]
        assert results
        assert all(t.category == "sweep" for t in results)

    @pytest.mark.asyncio
    async def test_filter_without_search_expires(self, make_callback_update, context) -> None:
        update = make_callback_update("techsf_diff_advanced")

        await technique_callback(update, context)

        text, _ = _edit_kwargs(update)
        assert "expired" in text

    @pytest.mark.asyncio
    async def test_markdown_in_query_is_escaped(self, command_update, context) -> None:
        context.args = ["*bold_"]

        await search_command(command_update, context)

        text, _ = _reply_kwargs(command_update)
        assert "\\*bold\\_" in text


class TestExport:

    @pytest.mark.asyncio
    async def test_full_library_by_default(self, command_update, context) -> None:
        await export_command(command_update, context)

        command_update.message.reply_document.assert_awaited_once()
        document = command_update.message.reply_document.call_args.kwargs["document"]
        assert len(json.loads(document.getvalue().decode("utf-8"))) == len(TECHNIQUES)

    @pytest.mark.asyncio
    async def test_last_results(self, command_update, context) -> None:
        context.user_data["last_results"] = ["armbar", "kimura"]

        await export_command(command_update, context)

        document = command_update.message.reply_document.call_args.kwargs["document"]
        exported = json.loads(document.getvalue().decode("utf-8"))
        assert [record["id"] for record in exported] == ["armbar", "kimura"]


class TestMentions:

    @pytest.mark.asyncio
    async def test_replies_with_cards(self, command_update, context) -> None:
        command_update.message.text = "how do I finish a kimura from closed guard"

        await technique_mentions(command_update, context)

        _, markup = _reply_kwargs(command_update)
        callbacks = keyboard_callbacks(markup)
        assert "techitem_kimura" in callbacks
        assert "techitem_closed-guard" in callbacks

    @pytest.mark.asyncio
    async def test_hint_when_nothing_found(self, command_update, context) -> None:
        command_update.message.text = "see you at class"

        await technique_mentions(command_update, context)

        text, markup = _reply_kwargs(command_update)
        assert "/search" in text
        assert markup is None
