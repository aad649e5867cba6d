import io
import logging
from datetime import datetime

from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.error import BadRequest
from telegram.ext import ContextTypes, ConversationHandler
from telegram.helpers import escape_markdown

from .catalog import (
    ALL,
    TECHNIQUES,
    export_catalog,
    filter_techniques,
    get_related_techniques,
    get_stats,
    get_technique_by_id,
    get_techniques_by_difficulty,
    get_techniques_by_position,
    group_by_category,
    parse_category,
    parse_difficulty,
    parse_position,
)
from .config import CALLBACK_DATA_LIMIT, get_page_size
from .helpers import find_techniques_in_text, page_bounds
from .models import (
    CATEGORY_LABELS,
    DIFFICULTY_LABELS,
    POSITION_LABELS,
    Category,
    Difficulty,
    Position,
)
from .youtube_search import technique_video_url

logger = logging.getLogger(__name__)

state_search_waiting = "SEARCH_WAITING_QUERY"

MAX_MENTIONS = 10


def callback_data(*parts):
    data = "_".join(str(p) for p in parts)
    if len(data.encode("utf-8")) > CALLBACK_DATA_LIMIT:
        raise ValueError(f"callback data too long: {data!r}")
    return data


def category_label(category):
    return CATEGORY_LABELS[Category(category)][0]


def difficulty_label(difficulty):
    label, belts = DIFFICULTY_LABELS[Difficulty(difficulty)]
    return f"{label.lower()} ({belts.lower()})"


def _position_text(technique):
    start = POSITION_LABELS[technique.starting_position].lower() if technique.starting_position else None
    end = POSITION_LABELS[technique.ending_position].lower() if technique.ending_position else None
    if start and end:
        return f"{start} → {end}"
    if start:
        return f"from {start}"
    if end:
        return f"ends in {end}"
    return None


def technique_card_text(technique):
    lines = [f"*{escape_markdown(technique.name)}*"]
    if technique.aliases:
        lines.append(f"_{escape_markdown(', '.join(technique.aliases))}_")
    lines.append("")

    kind = category_label(technique.category).lower()
    if technique.subcategory:
        kind += f" / {technique.subcategory.value}"
    lines.append(f"level: {difficulty_label(technique.difficulty)}")
    lines.append(f"type: {kind}")

    positions = _position_text(technique)
    if positions:
        lines.append(f"position: {positions}")

    rule_sets = technique.rule_sets()
    lines.append(f"legal in: {', '.join(rule_sets) if rule_sets else 'neither gi nor no-gi'}")

    if technique.points:
        lines.append(f"points: +{technique.points}")
    if technique.belt_restrictions:
        lines.append(f"⚠️ {escape_markdown(technique.belt_restrictions)}")

    lines.append("")
    lines.append(escape_markdown(technique.description))

    if technique.key_points:
        lines.append("")
        lines.append("*key points:*")
        for i, point in enumerate(technique.key_points, 1):
            lines.append(f"{i}. {escape_markdown(point)}")

    return "\n".join(lines)


def technique_card_keyboard(technique):
    keyboard = [[InlineKeyboardButton("▶ watch tutorial", url=technique_video_url(technique))]]

    for related in get_related_techniques(technique):
        keyboard.append([InlineKeyboardButton(
            f"↪ {related.name}",
            callback_data=callback_data("techitem", related.id),
        )])

    keyboard.append([InlineKeyboardButton(
        f"« back to {category_label(technique.category).lower()}",
        callback_data=callback_data("techcat", technique.category.value, ALL, 1),
    )])
    return InlineKeyboardMarkup(keyboard)


def results_text(title, techniques, page, per_page):
    """Grouped listing of one page of results."""
    page, total_pages, start, end = page_bounds(len(techniques), page, per_page)
    message = f"*{title}*  ({len(techniques)} techniques)\n\n"

    if not techniques:
        return message + "nothing matches. try a different filter or /search term."

    for category, items in group_by_category(techniques[start:end]):
        message += f"*{category_label(category).lower()}:*\n"
        for technique in items:
            message += f"  • {escape_markdown(technique.name)}  _{technique.difficulty.value}_\n"
        message += "\n"

    if total_pages > 1:
        message += f"_page {page} of {total_pages}_"
    return message.rstrip()


def results_keyboard(techniques, page, per_page, page_prefix):
    """One button per technique on the page, then prev/next navigation.

    page_prefix is the list of callback parts that the page number is appended to.
    """
    page, total_pages, start, end = page_bounds(len(techniques), page, per_page)
    keyboard = []
    for technique in techniques[start:end]:
        keyboard.append([InlineKeyboardButton(
            technique.name,
            callback_data=callback_data("techitem", technique.id),
        )])

    nav = []
    if page > 1:
        nav.append(InlineKeyboardButton("« prev", callback_data=callback_data(*page_prefix, page - 1)))
    if page < total_pages:
        nav.append(InlineKeyboardButton("next »", callback_data=callback_data(*page_prefix, page + 1)))
    if nav:
        keyboard.append(nav)
    return keyboard


def difficulty_filter_row(prefix, selected, suffix=()):
    row = []
    for value in [ALL] + [d.value for d in Difficulty]:
        label = value if value == ALL else DIFFICULTY_LABELS[Difficulty(value)][0].lower()
        if value == selected:
            label = f"· {label} ·"
        row.append(InlineKeyboardButton(label, callback_data=callback_data(*prefix, value, *suffix)))
    return row


def categories_keyboard():
    stats = get_stats()
    keyboard = []
    for category in Category:
        count = stats.by_category.get(category.value, 0)
        keyboard.append([InlineKeyboardButton(
            f"{category_label(category).lower()} ({count})",
            callback_data=callback_data("techcat", category.value, ALL, 1),
        )])
    return InlineKeyboardMarkup(keyboard)


def _remember_results(context, techniques):
    context.user_data["last_results"] = [t.id for t in techniques]


async def _show(update, text, reply_markup=None):
    """Edit the message behind a button press, or reply to a command."""
    if update.callback_query:
        try:
            await update.callback_query.edit_message_text(text, parse_mode="Markdown", reply_markup=reply_markup)
        except BadRequest as e:
            # pressing the filter that is already active re-renders the same message
            if "message is not modified" not in str(e).lower():
                raise
            logger.debug("message unchanged, skipped edit")
    else:
        await update.message.reply_text(text, parse_mode="Markdown", reply_markup=reply_markup)


async def technique_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    text = (
        f"*technique library*  ({len(TECHNIQUES)} techniques)\n\n"
        "choose a category:"
    )
    await update.message.reply_text(text, parse_mode="Markdown", reply_markup=categories_keyboard())


async def show_category(update, context, category, difficulty, page):
    per_page = get_page_size()
    techniques = filter_techniques(category=category, difficulty=difficulty)
    _remember_results(context, techniques)

    label, description = CATEGORY_LABELS[category]
    title = label.lower()
    if difficulty != ALL:
        title += f" · {difficulty}"

    text = f"_{description.lower()}_\n\n" + results_text(title, techniques, page, per_page)
    keyboard = [difficulty_filter_row(["techcat", category.value], difficulty, suffix=[1])]
    keyboard.extend(results_keyboard(techniques, page, per_page, ["techcat", category.value, difficulty]))
    keyboard.append([InlineKeyboardButton("« back to categories", callback_data="tech_main")])

    await _show(update, text, InlineKeyboardMarkup(keyboard))


async def show_technique(update, context, technique):
    await _show(update, technique_card_text(technique), technique_card_keyboard(technique))


async def show_search_results(update, context, page=1):
    search = context.user_data.get("search")
    if not search:
        await _show(update, "no active search. send /search followed by what you're looking for.")
        return

    per_page = get_page_size()
    techniques = filter_techniques(
        query=search["query"],
        category=search.get("category", ALL),
        difficulty=search.get("difficulty", ALL),
    )
    _remember_results(context, techniques)

    title = f"search: {escape_markdown(search['query'])}"
    filters_text = []
    if search.get("category", ALL) != ALL:
        filters_text.append(category_label(search["category"]).lower())
    if search.get("difficulty", ALL) != ALL:
        filters_text.append(search["difficulty"])
    if filters_text:
        title += f" ({', '.join(filters_text)})"

    keyboard = results_keyboard(techniques, page, per_page, ["techsearch"])
    keyboard.append(difficulty_filter_row(["techsf", "diff"], search.get("difficulty", ALL)))

    category_buttons = []
    for category in Category:
        label = category_label(category).lower()
        if search.get("category") == category.value:
            label = f"· {label} ·"
        category_buttons.append(InlineKeyboardButton(
            label,
            callback_data=callback_data("techsf", "cat", category.value),
        ))
    keyboard.extend([category_buttons[:4], category_buttons[4:]])
    keyboard.append([InlineKeyboardButton("all categories", callback_data=callback_data("techsf", "cat", ALL))])

    await _show(update, results_text(title, techniques, page, per_page), InlineKeyboardMarkup(keyboard))


async def show_position(update, context, position, page):
    per_page = get_page_size()
    techniques = get_techniques_by_position(position)
    _remember_results(context, techniques)

    title = f"from or into {POSITION_LABELS[position].lower()}"
    keyboard = results_keyboard(techniques, page, per_page, ["techpos", position.value])
    keyboard.append([InlineKeyboardButton("« back to positions", callback_data="techpos_menu")])
    await _show(update, results_text(title, techniques, page, per_page), InlineKeyboardMarkup(keyboard))


async def show_level(update, context, difficulty, page):
    per_page = get_page_size()
    techniques = get_techniques_by_difficulty(difficulty)
    _remember_results(context, techniques)

    title = difficulty_label(difficulty)
    keyboard = results_keyboard(techniques, page, per_page, ["techlvl", difficulty.value])
    keyboard.append([InlineKeyboardButton("« back to levels", callback_data="techlvl_menu")])
    await _show(update, results_text(title, techniques, page, per_page), InlineKeyboardMarkup(keyboard))


def positions_keyboard():
    buttons = []
    for position in Position:
        count = len(get_techniques_by_position(position))
        buttons.append(InlineKeyboardButton(
            f"{POSITION_LABELS[position].lower()} ({count})",
            callback_data=callback_data("techpos", position.value, 1),
        ))
    keyboard = [buttons[i:i + 2] for i in range(0, len(buttons), 2)]
    return InlineKeyboardMarkup(keyboard)


def levels_keyboard():
    stats = get_stats()
    keyboard = []
    for difficulty in Difficulty:
        count = stats.by_difficulty.get(difficulty.value, 0)
        keyboard.append([InlineKeyboardButton(
            f"{difficulty_label(difficulty)} ({count})",
            callback_data=callback_data("techlvl", difficulty.value, 1),
        )])
    return InlineKeyboardMarkup(keyboard)


async def position_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        "*positions*\n\nwhere are you? pick a position to see what starts or ends there.",
        parse_mode="Markdown",
        reply_markup=positions_keyboard(),
    )


async def level_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        "*levels*\n\nchoose a difficulty:",
        parse_mode="Markdown",
        reply_markup=levels_keyboard(),
    )


def stats_text():
    stats = get_stats()
    message = f"*technique library*\n\n*{stats.total}* techniques\n\n*by level:*\n"
    for difficulty in Difficulty:
        count = stats.by_difficulty.get(difficulty.value)
        if count:
            message += f"  {difficulty_label(difficulty)}: {count}\n"
    message += "\n*by category:*\n"
    for category in Category:
        count = stats.by_category.get(category.value)
        if count:
            message += f"  {category_label(category).lower()}: {count}\n"
    return message.rstrip()


async def library_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(stats_text(), parse_mode="Markdown")


async def search_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query_text = " ".join(context.args or []).strip()
    if not query_text:
        await update.message.reply_text(
            "*search techniques*\n\n"
            "what are you looking for? a name, an alias or a detail.\n"
            "examples: _kimura_, _juji_, _underhook_\n\n"
            "/cancel to abort",
            parse_mode="Markdown",
        )
        return state_search_waiting

    context.user_data["search"] = {"query": query_text, "category": ALL, "difficulty": ALL}
    await show_search_results(update, context)
    return ConversationHandler.END


async def search_receive_text(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query_text = update.message.text.strip()
    if not query_text:
        await update.message.reply_text("send a word or two to search for, or /cancel.")
        return state_search_waiting

    context.user_data["search"] = {"query": query_text, "category": ALL, "difficulty": ALL}
    await show_search_results(update, context)
    return ConversationHandler.END


async def export_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    ids = context.user_data.get("last_results")
    if ids:
        techniques = [t for t in (get_technique_by_id(i) for i in ids) if t is not None]
        caption = f"your last list: {len(techniques)} techniques"
    else:
        techniques = list(TECHNIQUES)
        caption = f"the full library: {len(techniques)} techniques"

    filename = f"techniques_{datetime.now().strftime('%Y-%m-%d')}.json"
    buf = io.BytesIO(export_catalog(techniques).encode("utf-8"))
    buf.name = filename

    await update.message.reply_document(document=buf, filename=filename, caption=caption)


async def technique_mentions(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Reply to plain chat text with the techniques it mentions."""
    text = update.message.text or ""
    found = find_techniques_in_text(text)

    if not found:
        await update.message.reply_text(
            "i didn't recognise a technique in that.\n"
            "try /search with a word or two, or browse /technique."
        )
        return

    keyboard = [
        [InlineKeyboardButton(t.name, callback_data=callback_data("techitem", t.id))]
        for t in found[:MAX_MENTIONS]
    ]
    await update.message.reply_text(
        "found in the library:",
        reply_markup=InlineKeyboardMarkup(keyboard),
    )


def _page(value):
    try:
        return int(value)
    except ValueError:
        return 1


async def technique_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    data = query.data

    if data == "tech_main":
        await query.edit_message_text(
            f"*technique library*  ({len(TECHNIQUES)} techniques)\n\nchoose a category:",
            parse_mode="Markdown",
            reply_markup=categories_keyboard(),
        )
        return

    if data == "techpos_menu":
        await query.edit_message_text(
            "*positions*\n\npick a position to see what starts or ends there.",
            parse_mode="Markdown",
            reply_markup=positions_keyboard(),
        )
        return

    if data == "techlvl_menu":
        await query.edit_message_text(
            "*levels*\n\nchoose a difficulty:",
            parse_mode="Markdown",
            reply_markup=levels_keyboard(),
        )
        return

    parts = data.split("_")

    if parts[0] == "techitem" and len(parts) == 2:
        technique = get_technique_by_id(parts[1])
        if technique is None:
            logger.debug("stale technique button: %s", data)
            return
        await show_technique(update, context, technique)

    elif parts[0] == "techcat" and len(parts) == 4:
        category = parse_category(parts[1])
        difficulty = parts[2]
        if category is None or (difficulty != ALL and parse_difficulty(difficulty) is None):
            logger.debug("stale category button: %s", data)
            return
        await show_category(update, context, category, difficulty, _page(parts[3]))

    elif parts[0] == "techpos" and len(parts) == 3:
        position = parse_position(parts[1])
        if position is None:
            logger.debug("stale position button: %s", data)
            return
        await show_position(update, context, position, _page(parts[2]))

    elif parts[0] == "techlvl" and len(parts) == 3:
        difficulty = parse_difficulty(parts[1])
        if difficulty is None:
            logger.debug("stale level button: %s", data)
            return
        await show_level(update, context, difficulty, _page(parts[2]))

    elif parts[0] == "techsearch" and len(parts) == 2:
        await show_search_results(update, context, _page(parts[1]))

    elif parts[0] == "techsf" and len(parts) == 3:
        search = context.user_data.get("search")
        if not search:
            await query.edit_message_text("that search has expired. send /search again.")
            return
        if parts[1] == "cat" and (parts[2] == ALL or parse_category(parts[2])):
            search["category"] = parts[2]
        elif parts[1] == "diff" and (parts[2] == ALL or parse_difficulty(parts[2])):
            search["difficulty"] = parts[2]
        else:
            logger.debug("stale search filter button: %s", data)
            return
        await show_search_results(update, context)

    else:
        logger.debug("unhandled technique callback: %s", data)
