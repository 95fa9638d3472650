import logging
import sys

import flet as ft

from src.rules.loader import configure_logging, load_rules, resolve_rules_path
from src.ui.context import AppContext
from src.ui.theme import AppTheme
from src.ui.views.export import ExportView

logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    # 1. Load Rules
    rules_path = resolve_rules_path()
    try:
        rules = load_rules(rules_path)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Rules load failed: {e}")
        page.add(ft.Text(f"Error: {e}", color="red", size=20))
        return

    configure_logging(rules)
    logger.info(f"Rules loaded from {rules_path}")

    # 2. Theme Setup
    page.title = rules.ui.window_title
    page.theme = AppTheme.light_theme()
    page.dark_theme = AppTheme.dark_theme()
    page.theme_mode = ft.ThemeMode.DARK

    # 3. Context + command table
    ctx = AppContext.create(rules)
    logger.info(f"Host commands: {', '.join(ctx.registry.names())}")

    page.add(ExportView(page, ctx))


def run() -> None:
    try:
        ft.app(target=main)
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    run()
