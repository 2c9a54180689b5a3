
import flet as ft


class AppTheme:
    """
    Centralized theme configuration for the console.
    Neutral grays with a blue accent; green/red reserved for feedback.
    """

    font_family = "Inter"

    # Colors - Light
    primary_light = "#2563eb" # Blue 600
    on_primary_light = "#ffffff"
    secondary_light = "#16a34a" # Green 600
    background_light = "#f3f4f6"
    surface_light = "#ffffff"
    error_light = "#dc2626"

    # Colors - Dark
    primary_dark = "#60a5fa"
    on_primary_dark = "#0f172a"
    secondary_dark = "#4ade80"
    background_dark = "#111827"
    surface_dark = "#1f2937"

    # Feedback
    success_bg = "#f0fdf4"
    success_fg = "#15803d"
    error_bg = "#fef2f2"
    error_fg = "#b91c1c"

    @classmethod
    def light_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_light,
                on_primary=cls.on_primary_light,
                secondary=cls.secondary_light,
                surface=cls.surface_light,
                error=cls.error_light,
            ),
            font_family=cls.font_family,
            use_material3=True,
        )

    @classmethod
    def dark_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_dark,
                on_primary=cls.on_primary_dark,
                secondary=cls.secondary_dark,
                surface=cls.surface_dark,
                error=cls.error_light, # Keep red for error
            ),
            font_family=cls.font_family,
            use_material3=True,
        )
