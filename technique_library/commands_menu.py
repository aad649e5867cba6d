from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import ContextTypes

from .catalog import TECHNIQUES
from .commands_info import restrictions_text, scoring_text
from .commands_techniques import (
    categories_keyboard,
    levels_keyboard,
    positions_keyboard,
    stats_text,
)


def main_menu_keyboard():
    return InlineKeyboardMarkup([
        [InlineKeyboardButton("📚 technique library", callback_data="menucmd_technique")],
        [InlineKeyboardButton("🔎 search", callback_data="menucmd_search")],
        [InlineKeyboardButton("📍 by position", callback_data="menucmd_position")],
        [InlineKeyboardButton("🥋 by level", callback_data="menucmd_level")],
        [InlineKeyboardButton("🏆 competition rules", callback_data="menu_rules")],
        [InlineKeyboardButton("📊 library stats", callback_data="menucmd_library")],
    ])


def welcome_text():
    return (
        "*gym technique library*\n\n"
        f"{len(TECHNIQUES)} techniques from our curriculum.\n"
        "browse below, or /search for anything: a name, an alias, a detail.\n"
        "you can also just type a technique name."
    )


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        welcome_text(),
        parse_mode="Markdown",
        reply_markup=main_menu_keyboard(),
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await start_command(update, context)


async def menu_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    data = query.data

    if data == "menu_main":
        await query.edit_message_text(
            welcome_text(),
            parse_mode="Markdown",
            reply_markup=main_menu_keyboard(),
        )

    elif data == "menu_rules":
        keyboard = InlineKeyboardMarkup([
            [InlineKeyboardButton("competition scoring", callback_data="menucmd_scoring")],
            [InlineKeyboardButton("belt & rule restrictions", callback_data="menucmd_illegal")],
            [InlineKeyboardButton("« back", callback_data="menu_main")],
        ])
        await query.edit_message_text(
            "*🏆 competition rules*\n\n"
            "points and restrictions, straight from the library.",
            parse_mode="Markdown",
            reply_markup=keyboard,
        )


async def menucmd_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    cmd = query.data.replace("menucmd_", "")

    if cmd == "search":
        await query.message.reply_text(
            "type /search followed by a name, an alias or a detail.\n"
            "example: /search juji",
        )
        return

    if cmd == "technique":
        await query.message.reply_text(
            f"*technique library*  ({len(TECHNIQUES)} techniques)\n\nchoose a category:",
            parse_mode="Markdown",
            reply_markup=categories_keyboard(),
        )
    elif cmd == "position":
        await query.message.reply_text(
            "*positions*\n\npick a position to see what starts or ends there.",
            parse_mode="Markdown",
            reply_markup=positions_keyboard(),
        )
    elif cmd == "level":
        await query.message.reply_text(
            "*levels*\n\nchoose a difficulty:",
            parse_mode="Markdown",
            reply_markup=levels_keyboard(),
        )
    elif cmd == "library":
        await query.message.reply_text(stats_text(), parse_mode="Markdown")
    elif cmd == "scoring":
        await query.message.reply_text(scoring_text(), parse_mode="Markdown")
    elif cmd == "illegal":
        await query.message.reply_text(restrictions_text(), parse_mode="Markdown")
