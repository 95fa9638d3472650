import logging

import flet as ft

from src.ui.context import AppContext, StatusMessage

logger = logging.getLogger(__name__)


def ExportView(page: ft.Page, ctx: AppContext) -> ft.Control:
    """Load a buffer and save it through the host save command."""

    buffer_label = ft.Text("No buffer loaded", italic=True)
    status_label = ft.Text("")
    outcome_label = ft.Text("", size=12)

    def show(message: StatusMessage) -> None:
        status_label.value = message.text
        status_label.color = ft.Colors.ERROR if message.is_error else None
        page.open(ft.SnackBar(ft.Text(message.text)))
        page.update()

    def refresh_buffer() -> None:
        if ctx.state.buffer_source:
            buffer_label.value = f"{ctx.state.buffer_source} ({len(ctx.state.buffer)} bytes)"
            buffer_label.italic = False
        else:
            buffer_label.value = "No buffer loaded"
            buffer_label.italic = True
        outcome_label.value = ctx.state.outcome_text()
        save_button.disabled = ctx.state.buffer_source is None
        clear_button.disabled = ctx.state.buffer_source is None
        page.update()

    def on_open_result(e: ft.FilePickerResultEvent) -> None:
        if not e.files:
            return
        picked = e.files[0]
        if not picked.path:
            show(StatusMessage("Selected file has no local path", is_error=True))
            return
        show(ctx.load_buffer(picked.path))
        refresh_buffer()

    def on_save_result(e: ft.FilePickerResultEvent) -> None:
        message = ctx.save_buffer(e.path)
        if message is None:
            logger.info("Save dialog cancelled")
            return
        show(message)
        refresh_buffer()

    def on_clear(_: ft.ControlEvent) -> None:
        ctx.state.clear()
        status_label.value = ""
        refresh_buffer()

    open_picker = ft.FilePicker(on_result=on_open_result)
    save_picker = ft.FilePicker(on_result=on_save_result)
    page.overlay.extend([open_picker, save_picker])

    save_button = ft.ElevatedButton(
        "Save as…",
        icon=ft.Icons.SAVE_ALT,
        disabled=True,
        on_click=lambda _: save_picker.save_file(
            dialog_title="Save visualization",
            file_name=ctx.rules.ui.default_file_name,
        ),
    )

    clear_button = ft.TextButton("Clear", icon=ft.Icons.CLEAR, disabled=True, on_click=on_clear)

    return ft.Container(
        content=ft.Column(
            [
                ft.Row(
                    [
                        ft.Text("Export", size=20, weight=ft.FontWeight.BOLD),
                        ft.Row(
                            [
                                ft.OutlinedButton(
                                    "Load buffer…",
                                    icon=ft.Icons.UPLOAD_FILE,
                                    on_click=lambda _: open_picker.pick_files(
                                        dialog_title="Choose a render to export",
                                        allow_multiple=False,
                                    ),
                                ),
                                save_button,
                                clear_button,
                            ]
                        ),
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                ),
                ft.Divider(),
                buffer_label,
                status_label,
                outcome_label,
            ]
        ),
        padding=20,
        expand=True,
    )
