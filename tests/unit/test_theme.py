"""
Unit tests for the panel stylesheet.

Validates:
- every object name the widgets set has a rule in APP_QSS
- color placeholders are fully rendered
"""

from __future__ import annotations

import pytest

from catpoint.ui.theme import APP_QSS, COLOR_ARMED, COLOR_CRIT


@pytest.mark.parametrize(
    "selector",
    [
        "QFrame#Card",
        "QLabel#PanelTitle",
        "QLabel#CameraView",
        "QPushButton#ArmButton:checked",
        "QPushButton#DangerButton",
    ],
)
def test_stylesheet_styles_widget_object_names(selector: str) -> None:
    assert selector in APP_QSS


def test_stylesheet_colors_are_rendered() -> None:
    assert "{COLOR" not in APP_QSS
    assert COLOR_ARMED in APP_QSS
    assert COLOR_CRIT in APP_QSS
