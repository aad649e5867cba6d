from telegram import Update
from telegram.ext import ContextTypes
from telegram.helpers import escape_markdown

from .catalog import TECHNIQUES, group_by_category
from .models import CATEGORY_LABELS


def scoring_text():
    scored = [t for t in TECHNIQUES if t.points]
    message = (
        "*competition scoring (ibjjf)*\n"
        "submission wins instantly.\n"
        "all positions must be held 3s to score.\n\n"
    )

    for category, items in group_by_category(scored):
        message += f"*{CATEGORY_LABELS[category][0].lower()}:*\n```\n"
        width = max(len(t.name) for t in items) + 2
        for technique in items:
            message += f"{technique.name.lower():<{width}}+{technique.points}\n"
        message += "```\n"

    return message.rstrip()


def restrictions_text():
    restricted = [t for t in TECHNIQUES if t.belt_restrictions]
    gi_only = [t for t in TECHNIQUES if t.gi_legal and not t.no_gi_legal]
    no_gi_only = [t for t in TECHNIQUES if t.no_gi_legal and not t.gi_legal]

    message = "*belt restrictions*\n\n"
    for technique in restricted:
        name = escape_markdown(technique.name.lower())
        message += f"• {name}: {escape_markdown(technique.belt_restrictions.lower())}\n"

    if gi_only:
        message += "\n*gi only*\n"
        message += ", ".join(escape_markdown(t.name.lower()) for t in gi_only) + "\n"

    if no_gi_only:
        message += "\n*no-gi only*\n"
        message += ", ".join(escape_markdown(t.name.lower()) for t in no_gi_only) + "\n"

    message += "\n_using a technique above your belt is an immediate dq_"
    return message


async def scoring_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(scoring_text(), parse_mode="Markdown")


async def illegal_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(restrictions_text(), parse_mode="Markdown")
