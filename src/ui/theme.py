from dataclasses import dataclass

import flet as ft


@dataclass(frozen=True)
class Palette:
    primary: str
    on_primary: str
    secondary: str
    surface: str
    error: str = "#d62828"


LIGHT = Palette(
    primary="#1f3a5f",
    on_primary="#ffffff",
    secondary="#2a9d8f",
    surface="#ffffff",
)

# Dark-first: the shell sits next to the visualization canvas
DARK = Palette(
    primary="#8ab4f8",
    on_primary="#0b1526",
    secondary="#4fd1c5",
    surface="#161b22",
)


class AppTheme:
    """Theme configuration for the desktop shell."""

    font_family = "Inter"

    @classmethod
    def build(cls, palette: Palette) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=palette.primary,
                on_primary=palette.on_primary,
                secondary=palette.secondary,
                surface=palette.surface,
                error=palette.error,
            ),
            font_family=cls.font_family,
            use_material3=True,
        )

    @classmethod
    def light_theme(cls) -> ft.Theme:
        return cls.build(LIGHT)

    @classmethod
    def dark_theme(cls) -> ft.Theme:
        return cls.build(DARK)
