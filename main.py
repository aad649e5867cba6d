import logging

from telegram import BotCommand, Update
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    CallbackQueryHandler,
    ConversationHandler,
    filters,
)

from technique_library.config import CONVERSATION_TIMEOUT, get_bot_token, get_log_level
from technique_library.catalog import TECHNIQUES, validate_catalog
from technique_library.commands_basic import cancel_command, timeout_handler, error_handler
from technique_library.commands_menu import (
    start_command,
    help_command,
    menu_callback,
    menucmd_callback,
)
from technique_library.commands_info import scoring_command, illegal_command
from technique_library.commands_techniques import (
    technique_command,
    technique_callback,
    position_command,
    level_command,
    library_command,
    search_command,
    search_receive_text,
    export_command,
    technique_mentions,
    state_search_waiting,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=get_log_level(),
)
logger = logging.getLogger(__name__)


def check_catalog():
    issues = validate_catalog()
    for issue in issues:
        logger.warning("catalog %s in %s: %s", issue.kind, issue.technique_id, issue.detail)
    logger.info("technique library loaded: %d techniques, %d issues", len(TECHNIQUES), len(issues))
    return issues


async def post_init(application):
    await application.bot.set_my_commands([
        BotCommand("technique", "browse techniques"),
        BotCommand("search", "search the library"),
        BotCommand("position", "techniques by position"),
        BotCommand("level", "techniques by level"),
        BotCommand("scoring", "competition points"),
        BotCommand("illegal", "belt restrictions"),
        BotCommand("library", "library stats"),
        BotCommand("export", "download as json"),
        BotCommand("help", "open menu"),
    ])


def build_application(token):
    app = Application.builder().token(token).post_init(post_init).build()

    cmd_fallback = MessageHandler(filters.COMMAND, cancel_command)

    search_conversation = ConversationHandler(
        entry_points=[CommandHandler("search", search_command)],
        states={
            state_search_waiting: [
                MessageHandler(filters.TEXT & ~filters.COMMAND, search_receive_text)
            ],
            ConversationHandler.TIMEOUT: [MessageHandler(filters.ALL, timeout_handler)],
        },
        fallbacks=[CommandHandler("cancel", cancel_command), cmd_fallback],
        conversation_timeout=CONVERSATION_TIMEOUT,
    )

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(search_conversation)
    app.add_handler(CommandHandler("technique", technique_command))
    app.add_handler(CommandHandler("position", position_command))
    app.add_handler(CommandHandler("level", level_command))
    app.add_handler(CommandHandler("library", library_command))
    app.add_handler(CommandHandler("scoring", scoring_command))
    app.add_handler(CommandHandler("illegal", illegal_command))
    app.add_handler(CommandHandler("export", export_command))

    app.add_handler(CallbackQueryHandler(technique_callback, pattern="^tech"))
    app.add_handler(CallbackQueryHandler(menu_callback, pattern="^menu_"))
    app.add_handler(CallbackQueryHandler(menucmd_callback, pattern="^menucmd_"))

    # plain text: look for technique names (must be last)
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, technique_mentions))

    app.add_error_handler(error_handler)
    return app


def main():
    token = get_bot_token()

    if not token:
        print("set TELEGRAM_BOT_TOKEN in .env")
        print("get one from @BotFather on Telegram")
        return

    check_catalog()
    app = build_application(token)

    print("Technique bot running! Ctrl+C to stop.")
    app.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
